"""Custom exception hierarchy for the SVG data-URI icon helpers.

Most icon problems are reported softly through the logger so that a missing
icon never aborts a stylesheet build. The exceptions below cover the cases
that must stop the caller: broken configuration, incomplete registries and
unreadable manifests, plus the strict-mode variants of the soft failures.

Exception Hierarchy:
    IconStylesError (Base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── ConfigFileNotFoundError
    ├── RegistryError
    │   ├── IncompleteRegistryError
    │   ├── UnknownIconError
    │   ├── InvalidManifestError
    │   └── ManifestFileNotFoundError
    ├── InvalidColorError
    └── InvalidOpacityError
"""

from typing import Any


# Base Exception
class IconStylesError(Exception):
    """Base exception for all icon stylesheet errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(IconStylesError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration contains invalid values.

    Example:
        raise InvalidConfigError(
            "Invalid configuration file",
            {"path": "icons.yaml", "error": "default_color: not a color"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a configuration file cannot be found."""
    pass


# Registry Exceptions
class RegistryError(IconStylesError):
    """Base exception for icon registry errors."""
    pass


class IncompleteRegistryError(RegistryError):
    """Raised when a registry entry has no callable accessor.

    Example:
        raise IncompleteRegistryError(
            "Icon registry is missing accessors",
            {"missing": ["arrow", "social-facebook"]}
        )
    """
    pass


class UnknownIconError(RegistryError):
    """Raised in strict mode when an icon key is not registered."""
    pass


class InvalidManifestError(RegistryError):
    """Raised when a generated icon manifest is malformed.

    Example:
        raise InvalidManifestError(
            "Manifest entry has no template",
            {"icon": "arrow"}
        )
    """
    pass


class ManifestFileNotFoundError(RegistryError):
    """Raised when the generated icon manifest file does not exist."""
    pass


# Color Exceptions
class InvalidColorError(IconStylesError):
    """Raised when a value cannot be interpreted as a color.

    Example:
        raise InvalidColorError(
            "Unrecognized color value",
            {"value": "#12"}
        )
    """
    pass


class InvalidOpacityError(IconStylesError):
    """Raised when an opacity is not a finite number.

    Example:
        raise InvalidOpacityError(
            "Opacity must be a number",
            {"opacity": "'half'"}
        )
    """
    pass


def chain_exception(new_exception: IconStylesError, cause: Exception) -> IconStylesError:
    """Chain a new exception with its underlying cause.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise chain_exception(
                InvalidManifestError("Manifest is not valid YAML", {"path": path}),
                e
            )
    """
    new_exception.__cause__ = cause
    return new_exception
