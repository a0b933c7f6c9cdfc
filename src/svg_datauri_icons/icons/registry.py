"""Icon registry built from the output of the external icon generator.

The generator emits one accessor per icon plus a table of icon metadata.
This module holds both, checks that they agree, and answers listing queries.
It also loads the generator's manifest file, where each icon is described by
a markup template with fill, stroke and style placeholders.
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from svg_datauri_icons.constants import (
    FILL_PLACEHOLDER,
    MANIFEST_ICONS_KEY,
    STROKE_PLACEHOLDER,
    STYLES_PLACEHOLDER,
)
from svg_datauri_icons.exceptions import (
    IncompleteRegistryError,
    InvalidManifestError,
    ManifestFileNotFoundError,
    chain_exception,
)
from svg_datauri_icons.utils import file_utils

logger = logging.getLogger(__name__)


class IconAccessor(Protocol):
    """Generated per-icon function returning the icon's data-URI payload."""

    def __call__(self, fill: str, stroke: str, extra_styles: str) -> str:
        """Render the icon markup.

        Args:
            fill: Encoded fill color
            stroke: Encoded stroke color
            extra_styles: Pre-encoded style fragment

        Returns:
            Data-URI payload such as ``data:image/svg+xml,...``
        """
        ...


class IconEntry(BaseModel):
    """Metadata recorded for one icon."""

    model_config = ConfigDict(frozen=True)

    name: str
    folder: str | None = None


def template_accessor(template: str) -> IconAccessor:
    """Build an accessor from a generated markup template.

    Args:
        template: Data-URI payload containing ``%FILL%``, ``%STROKE%`` and
            ``%STYLES%`` placeholders. Missing placeholders are fine.

    Returns:
        Accessor substituting its arguments into the template.
    """

    def accessor(fill: str, stroke: str, extra_styles: str) -> str:
        # Styles last so a fragment can never be re-substituted
        return (
            template.replace(FILL_PLACEHOLDER, fill)
            .replace(STROKE_PLACEHOLDER, stroke)
            .replace(STYLES_PLACEHOLDER, extra_styles)
        )

    return accessor


class IconRegistry:
    """Read-only table of registered icons and their accessors.

    Keys keep the order in which the generator emitted them; listing
    never re-sorts. Every key must have a callable accessor, which is
    checked once at construction.
    """

    def __init__(
        self,
        entries: Mapping[str, IconEntry],
        accessors: Mapping[str, IconAccessor],
    ) -> None:
        """Initialize the registry.

        Args:
            entries: Icon key to metadata, in generator order
            accessors: Icon key to accessor function

        Raises:
            IncompleteRegistryError: If any entry has no callable accessor.
        """
        missing = [key for key in entries if not callable(accessors.get(key))]
        if missing:
            raise IncompleteRegistryError(
                "Icon registry is missing accessors", {"missing": missing}
            )

        extra = [key for key in accessors if key not in entries]
        if extra:
            logger.debug(f"Ignoring {len(extra)} accessors without registry entries: {extra}")

        self._entries: dict[str, IconEntry] = dict(entries)
        self._accessors: dict[str, IconAccessor] = {key: accessors[key] for key in entries}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def keys(self) -> list[str]:
        """Return all icon keys in registry order."""
        return list(self._entries)

    def entry(self, key: str) -> IconEntry | None:
        """Return the metadata for an icon key, if registered."""
        return self._entries.get(key)

    def get_accessor(self, key: str) -> IconAccessor | None:
        """Return the accessor for an icon key, if registered."""
        return self._accessors.get(key)

    def list_icons(self, folder: str | None = None) -> list[str]:
        """List icon names recorded under a folder.

        Args:
            folder: Folder to filter on. None selects icons without a folder.

        Returns:
            Matching icon names in registry order, possibly empty.
        """
        return [entry.name for entry in self._entries.values() if entry.folder == folder]

    def list_keys(self, folder: str | None = None) -> list[str]:
        """List icon keys recorded under a folder.

        Unlike list_icons, the results can be passed straight to the renderer.

        Args:
            folder: Folder to filter on. None selects icons without a folder.

        Returns:
            Matching icon keys in registry order, possibly empty.
        """
        return [key for key, entry in self._entries.items() if entry.folder == folder]

    @classmethod
    def from_manifest(cls, data: Any) -> "IconRegistry":
        """Build a registry from parsed manifest data.

        The manifest looks like::

            icons:
              arrow:
                name: arrow
                folder: null
                template: "data:image/svg+xml,<svg fill='%FILL%' .../>"

        An icon may also be given as a bare template string, in which case
        its name is the key and it has no folder.

        Args:
            data: Parsed manifest

        Returns:
            The registry.

        Raises:
            InvalidManifestError: If the manifest structure is wrong.
        """
        icons = data.get(MANIFEST_ICONS_KEY) if isinstance(data, dict) else None
        if not isinstance(icons, dict):
            raise InvalidManifestError(
                "Manifest must contain an 'icons' mapping",
                {"type": type(icons).__name__},
            )

        entries: dict[str, IconEntry] = {}
        accessors: dict[str, IconAccessor] = {}

        for key, item in icons.items():
            if not isinstance(key, str):
                raise InvalidManifestError("Icon keys must be strings", {"icon": repr(key)})

            if isinstance(item, str):
                item = {"template": item}
            if not isinstance(item, dict):
                raise InvalidManifestError("Icon entry must be a mapping", {"icon": key})

            template = item.get("template")
            if not isinstance(template, str):
                raise InvalidManifestError("Icon entry has no template", {"icon": key})

            try:
                entries[key] = IconEntry(name=item.get("name", key), folder=item.get("folder"))
            except ValidationError as e:
                raise chain_exception(
                    InvalidManifestError("Invalid icon metadata", {"icon": key, "error": str(e)}),
                    e,
                )
            accessors[key] = template_accessor(template)

        logger.debug(f"Loaded {len(entries)} icons from manifest")
        return cls(entries, accessors)

    @classmethod
    def from_manifest_file(cls, path: str | Path) -> "IconRegistry":
        """Load a registry from a YAML or JSON manifest file.

        Args:
            path: Manifest file path

        Returns:
            The registry.

        Raises:
            ManifestFileNotFoundError: If the file does not exist.
            InvalidManifestError: If the file cannot be read, parsed, or is malformed.
        """
        if not file_utils.file_exists(path):
            raise ManifestFileNotFoundError("Icon manifest not found", {"path": str(path)})

        try:
            data = yaml.safe_load(file_utils.read_text(path))
        except yaml.YAMLError as e:
            raise chain_exception(
                InvalidManifestError("Manifest is not valid YAML", {"path": str(path)}), e
            )
        except (OSError, UnicodeDecodeError) as e:
            raise chain_exception(
                InvalidManifestError("Manifest could not be read", {"path": str(path), "error": str(e)}), e
            )

        return cls.from_manifest(data)
