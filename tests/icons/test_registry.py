"""Tests for the icon registry and manifest loading."""

from pathlib import Path

import pytest

from svg_datauri_icons.exceptions import (
    IncompleteRegistryError,
    InvalidManifestError,
    ManifestFileNotFoundError,
)
from svg_datauri_icons.icons.registry import IconEntry, IconRegistry, template_accessor


def _accessor(fill: str, stroke: str, extra_styles: str) -> str:
    return f"data:image/svg+xml,{fill}|{stroke}|{extra_styles}"


@pytest.fixture()
def small_registry() -> IconRegistry:
    """Registry built directly from entries and accessors."""
    entries = {
        "zeta": IconEntry(name="zeta"),
        "social-b": IconEntry(name="b", folder="social"),
        "alpha": IconEntry(name="alpha", folder=None),
        "social-a": IconEntry(name="a", folder="social"),
        "ui-x": IconEntry(name="x", folder="ui"),
    }
    return IconRegistry(entries, {key: _accessor for key in entries})


class TestTemplateAccessor:
    """Tests for template_accessor."""

    def test_substitutes_placeholders(self) -> None:
        """Test fill, stroke and styles are substituted."""
        accessor = template_accessor("data:image/svg+xml,<svg fill='%FILL%' stroke='%STROKE%' style='%STYLES%'/>")
        assert accessor("F", "S", "X") == "data:image/svg+xml,<svg fill='F' stroke='S' style='X'/>"

    def test_repeated_placeholders(self) -> None:
        """Test every occurrence of a placeholder is replaced."""
        accessor = template_accessor("%FILL%-%FILL%")
        assert accessor("a", "b", "") == "a-a"

    def test_missing_placeholders(self) -> None:
        """Test templates without placeholders are returned unchanged."""
        assert template_accessor("data:image/svg+xml,<svg/>")("a", "b", "c") == "data:image/svg+xml,<svg/>"

    def test_styles_are_not_resubstituted(self) -> None:
        """Test a style fragment containing a placeholder stays literal."""
        accessor = template_accessor("%STYLES%")
        assert accessor("red", "blue", "%FILL%") == "%FILL%"


class TestIconRegistry:
    """Tests for IconRegistry."""

    def test_list_icons_without_folder(self, small_registry: IconRegistry) -> None:
        """Test None selects icons with no folder, in insertion order."""
        assert small_registry.list_icons() == ["zeta", "alpha"]
        assert small_registry.list_icons(None) == ["zeta", "alpha"]

    def test_list_icons_by_folder(self, small_registry: IconRegistry) -> None:
        """Test a folder selects only its icons, without re-sorting."""
        assert small_registry.list_icons("social") == ["b", "a"]
        assert small_registry.list_icons("ui") == ["x"]

    def test_list_icons_unknown_folder(self, small_registry: IconRegistry) -> None:
        """Test an unknown folder gives an empty list."""
        assert small_registry.list_icons("missing") == []

    def test_empty_registry(self) -> None:
        """Test an empty registry lists nothing."""
        registry = IconRegistry({}, {})
        assert registry.list_icons() == []
        assert len(registry) == 0

    def test_missing_accessor_rejected(self) -> None:
        """Test construction fails when an entry has no accessor."""
        entries = {"arrow": IconEntry(name="arrow"), "close": IconEntry(name="close")}
        with pytest.raises(IncompleteRegistryError) as exc_info:
            IconRegistry(entries, {"arrow": _accessor})
        assert exc_info.value.details["missing"] == ["close"]

    def test_non_callable_accessor_rejected(self) -> None:
        """Test construction fails when an accessor is not callable."""
        with pytest.raises(IncompleteRegistryError):
            IconRegistry({"arrow": IconEntry(name="arrow")}, {"arrow": "not a function"})  # type: ignore[dict-item]

    def test_extra_accessors_ignored(self) -> None:
        """Test accessors without entries are not registered."""
        registry = IconRegistry({"arrow": IconEntry(name="arrow")}, {"arrow": _accessor, "other": _accessor})
        assert registry.keys() == ["arrow"]
        assert registry.get_accessor("other") is None

    def test_lookup(self, small_registry: IconRegistry) -> None:
        """Test accessor and entry lookup."""
        assert "alpha" in small_registry
        assert "nope" not in small_registry
        assert small_registry.get_accessor("alpha") is _accessor
        assert small_registry.get_accessor("nope") is None
        assert small_registry.entry("social-a") == IconEntry(name="a", folder="social")
        assert list(small_registry) == ["zeta", "social-b", "alpha", "social-a", "ui-x"]


class TestManifest:
    """Tests for manifest loading."""

    def test_from_manifest_file(self, manifest_path: Path) -> None:
        """Test the test manifest loads in file order."""
        registry = IconRegistry.from_manifest_file(manifest_path)
        assert registry.keys() == ["arrow", "social-twitter", "close", "social-facebook", "ui-check"]
        assert registry.list_icons() == ["arrow", "close", "ui-check"]
        assert registry.list_icons("social") == ["twitter", "facebook"]

    def test_manifest_accessor(self, registry: IconRegistry) -> None:
        """Test manifest templates become working accessors."""
        accessor = registry.get_accessor("arrow")
        assert accessor is not None
        assert accessor("F", "S", "") == "data:image/svg+xml,<svg fill='F' stroke='S'/>"

    def test_shorthand_entry(self) -> None:
        """Test a bare template string uses the key as name and no folder."""
        registry = IconRegistry.from_manifest({"icons": {"dot": "data:image/svg+xml,<svg/>"}})
        assert registry.entry("dot") == IconEntry(name="dot", folder=None)

    def test_name_defaults_to_key(self) -> None:
        """Test entries without a name use their key."""
        registry = IconRegistry.from_manifest({"icons": {"dot": {"template": "x", "folder": "ui"}}})
        assert registry.list_icons("ui") == ["dot"]

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [],
            {},
            {"icons": []},
            {"icons": {"dot": 3}},
            {"icons": {"dot": {"name": "dot"}}},
            {"icons": {"dot": {"template": "x", "folder": ["a"]}}},
            {"icons": {1: "x"}},
        ],
    )
    def test_malformed_manifest(self, data: object) -> None:
        """Test malformed manifests are rejected."""
        with pytest.raises(InvalidManifestError):
            IconRegistry.from_manifest(data)

    def test_missing_manifest_file(self, tmp_path: Path) -> None:
        """Test a missing manifest file is reported."""
        with pytest.raises(ManifestFileNotFoundError):
            IconRegistry.from_manifest_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test unparsable manifest files are reported with their cause."""
        path = tmp_path / "broken.yaml"
        path.write_text("icons: [unclosed", encoding="utf-8")
        with pytest.raises(InvalidManifestError) as exc_info:
            IconRegistry.from_manifest_file(path)
        assert exc_info.value.__cause__ is not None

    def test_json_manifest(self, tmp_path: Path) -> None:
        """Test JSON manifests load through the YAML parser."""
        path = tmp_path / "icons.json"
        path.write_text('{"icons": {"b": {"template": "x"}, "a": {"template": "y"}}}', encoding="utf-8")
        assert IconRegistry.from_manifest_file(path).keys() == ["b", "a"]

    def test_undecodable_manifest(self, tmp_path: Path) -> None:
        """Test a manifest that is not UTF-8 is reported as invalid."""
        path = tmp_path / "binary.yaml"
        path.write_bytes(b'icons:\n  a: "\xff\xfe"\n')
        with pytest.raises(InvalidManifestError) as exc_info:
            IconRegistry.from_manifest_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_list_keys_by_folder(self, registry: IconRegistry) -> None:
        """Test keys are listed per folder and resolve to accessors."""
        assert registry.list_keys("social") == ["social-twitter", "social-facebook"]
        assert registry.list_keys() == ["arrow", "close", "ui-check"]
        assert all(registry.get_accessor(key) for key in registry.list_keys("social"))
