"""Configuration models for the SVG data-URI icon helpers.

Defines Pydantic models for icon rendering defaults and logging, loaded from
a YAML file once before any icon is rendered.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from svg_datauri_icons.constants import (
    DEFAULT_BACKGROUND_POSITION,
    DEFAULT_BACKGROUND_REPEAT,
    DEFAULT_BACKGROUND_SIZE,
    DEFAULT_COLOR,
    VALID_LOG_FORMATS,
    VALID_LOG_LEVELS,
)
from svg_datauri_icons.exceptions import InvalidColorError
from svg_datauri_icons.models.color import Color


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return Path(path) if isinstance(path, str) else path


class IconConfig(BaseModel):
    """Icon rendering defaults."""

    default_color: Color = Field(default_factory=lambda: Color.parse(DEFAULT_COLOR))
    as_url: bool = True  # Wrap rendered data URIs in url(...)
    strict: bool = False  # Raise instead of warning on unknown icons/colors
    background_position: str = DEFAULT_BACKGROUND_POSITION
    background_size: str = DEFAULT_BACKGROUND_SIZE
    background_repeat: str = DEFAULT_BACKGROUND_REPEAT

    @field_validator("default_color", mode="before")
    @classmethod
    def parse_default_color(cls, v: Any) -> Color:
        """Accept any color notation understood by Color.parse.

        Args:
            v: The raw color value.

        Returns:
            The parsed color.

        Raises:
            ValueError: If the value is not a recognized color.
        """
        if isinstance(v, dict):
            return Color.model_validate(v)
        try:
            return Color.parse(v)
        except InvalidColorError as e:
            raise ValueError(f"default_color is not a recognized color: {v!r}") from e

    @field_validator("background_position", "background_size", "background_repeat")
    @classmethod
    def validate_background_value(cls, v: str) -> str:
        """Validate background shorthand defaults are not blank.

        Args:
            v: The CSS value.

        Returns:
            The stripped CSS value.

        Raises:
            ValueError: If the value is empty.
        """
        if not v.strip():
            raise ValueError("Background defaults must not be empty")
        return v.strip()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: str | None = None
    format: str = "text"
    max_size_mb: int = 5
    backup_count: int = 3

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the log level name.

        Args:
            v: The log level name.

        Returns:
            The upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the log output format.

        Args:
            v: The log format name.

        Returns:
            The validated log format.

        Raises:
            ValueError: If the format is not supported.
        """
        if v.lower() not in VALID_LOG_FORMATS:
            raise ValueError(f"Log format must be one of: {', '.join(VALID_LOG_FORMATS)}")
        return v.lower()


class AppConfig(BaseModel):
    """Main application configuration."""

    icons: IconConfig = Field(default_factory=IconConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    manifest: str | None = None  # Generated icon manifest (YAML or JSON)
    template_dir: str | None = None
    debug: bool = False

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file.

        Returns:
            An initialized AppConfig object with values from the YAML file.
            An empty file yields the defaults.

        Raises:
            FileNotFoundError: If the specified config file doesn't exist.
            UnicodeDecodeError: If the file is not valid UTF-8.
            yaml.YAMLError: If the YAML file has invalid syntax.
            ValidationError: If the configuration values don't match the expected schema.
        """
        import yaml

        from svg_datauri_icons.utils.file_utils import read_text

        path = _normalize_path(config_path)
        config_data = yaml.safe_load(read_text(path))

        return cls.model_validate(config_data or {})
