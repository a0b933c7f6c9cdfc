"""Common fixtures for testing the SVG data-URI icon helpers."""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

from svg_datauri_icons.icons.registry import IconRegistry
from svg_datauri_icons.icons.renderer import IconRenderer
from svg_datauri_icons.models.color import Color
from svg_datauri_icons.models.config import AppConfig, IconConfig

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers the CLI attaches so tests do not leak output."""
    yield
    logger = logging.getLogger("svg_datauri_icons")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def data_dir() -> Path:
    """Path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def test_config_path() -> Path:
    """Get the path to the test config file."""
    return DATA_DIR / "test_config.yaml"


@pytest.fixture()
def manifest_path() -> Path:
    """Get the path to the test icon manifest."""
    return DATA_DIR / "test_manifest.yaml"


@pytest.fixture()
def template_dir() -> Path:
    """Path to the stylesheet templates directory."""
    return DATA_DIR / "templates"


@pytest.fixture()
def test_config_data(test_config_path: Path) -> dict[str, Any]:
    """Load test configuration data from YAML."""
    with open(test_config_path) as f:
        return yaml.safe_load(f)


@pytest.fixture()
def app_config(test_config_data: dict[str, Any]) -> AppConfig:
    """Create a test application configuration."""
    return AppConfig.model_validate(test_config_data)


@pytest.fixture()
def registry(manifest_path: Path) -> IconRegistry:
    """Registry loaded from the test manifest."""
    return IconRegistry.from_manifest_file(manifest_path)


@pytest.fixture()
def renderer(registry: IconRegistry) -> IconRenderer:
    """Renderer with default icon settings."""
    return IconRenderer(registry, IconConfig())


@pytest.fixture()
def black() -> Color:
    """Opaque black."""
    return Color(red=0, green=0, blue=0, alpha=1)
