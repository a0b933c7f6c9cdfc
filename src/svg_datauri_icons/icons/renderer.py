"""Icon rendering into data-URI values.

Resolves an icon key to its generated accessor, feeds it encoded colors and
an extra style fragment, and returns the data URI, optionally wrapped in
``url(...)``.
"""

import logging
import math
from typing import Any

from svg_datauri_icons.constants import ENCODED_COLON, ENCODED_SEMICOLON
from svg_datauri_icons.exceptions import (
    IconStylesError,
    InvalidColorError,
    InvalidOpacityError,
    UnknownIconError,
)
from svg_datauri_icons.icons.color_encoder import encode_color, format_number
from svg_datauri_icons.icons.registry import IconRegistry
from svg_datauri_icons.models.color import Color
from svg_datauri_icons.models.config import IconConfig

logger = logging.getLogger(__name__)


class IconRenderer:
    """Renders registered icons as data-URI strings.

    Problems with the icon key or colors are reported as warnings and the
    call returns None, so one missing icon does not abort a stylesheet
    build. With ``strict`` enabled in the config they raise instead.
    """

    def __init__(self, registry: IconRegistry, config: IconConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            registry: Registered icons and their accessors
            config: Rendering defaults (tint color, url() wrapping)
        """
        self.registry = registry
        self.config = config or IconConfig()

    def render(
        self,
        icon: Any,
        color: Any = None,
        fill_color: Any = None,
        stroke_color: Any = None,
        opacity: Any = 1,
        extra_styles: str = "",
        as_url: bool | None = None,
    ) -> str | None:
        """Render an icon as a data URI.

        Args:
            icon: Registered icon key
            color: Tint used for fill and stroke unless given separately.
                Defaults to the configured color.
            fill_color: Fill tint
            stroke_color: Stroke tint
            opacity: Icon opacity, a number or numeric string. Anything but 1
                adds an opacity style.
            extra_styles: Already percent-encoded style fragment, passed
                through untouched
            as_url: Wrap the result in ``url(...)``. Defaults to the config.

        Returns:
            The data URI (or url() value), or None when the icon, a color or
            the opacity is not usable.

        Raises:
            UnknownIconError: In strict mode, for an unregistered icon.
            InvalidColorError: In strict mode, for an unrecognized color.
            InvalidOpacityError: In strict mode, for a non-numeric opacity.
        """
        if as_url is None:
            as_url = self.config.as_url

        try:
            opacity = _coerce_opacity(opacity)
        except InvalidOpacityError as e:
            return self._fail(e)

        if opacity != 1:
            extra_styles = f"opacity{ENCODED_COLON}{format_number(opacity)}{ENCODED_SEMICOLON}{extra_styles}"

        try:
            base = self.config.default_color if color is None else Color.parse(color)
            fill = base if fill_color is None else Color.parse(fill_color)
            stroke = base if stroke_color is None else Color.parse(stroke_color)
        except InvalidColorError as e:
            return self._fail(e)

        accessor = self.registry.get_accessor(icon) if isinstance(icon, str) else None
        if accessor is None:
            return self._fail(UnknownIconError("Icon is not registered", {"icon": repr(icon)}))

        payload = accessor(encode_color(fill), encode_color(stroke), extra_styles)

        if as_url:
            return f"url({payload})"
        return payload

    def list_icons(self, folder: str | None = None) -> list[str]:
        """List icon names under a folder, in registry order."""
        return self.registry.list_icons(folder)

    def list_icon_keys(self, folder: str | None = None) -> list[str]:
        """List renderable icon keys under a folder, in registry order."""
        return self.registry.list_keys(folder)

    def _fail(self, error: IconStylesError) -> None:
        if self.config.strict:
            raise error
        logger.warning(f"Icon not rendered: {error}")
        return None


def _coerce_opacity(value: Any) -> int | float:
    # Template arguments often arrive as strings
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError as e:
            raise InvalidOpacityError("Opacity must be a number", {"opacity": repr(value)}) from e
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        raise InvalidOpacityError("Opacity must be a number", {"opacity": repr(value)})
    return value
