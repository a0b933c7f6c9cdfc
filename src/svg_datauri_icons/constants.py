"""Application-wide constants for the SVG data-URI icon helpers.

Constants are grouped into the following categories:
- URI Encoding Constants: Escapes used inside data-URI payloads
- Template Placeholders: Markers substituted by generated icon accessors
- Background Defaults: Values for the background shorthand helper
- Color Constants: Default tint and CSS keyword table
- Logging Constants: File rotation settings
"""

# URI encoding constants
# Only the characters that break a color function inside a data URI are escaped
ENCODED_OPEN_PAREN = "%28"
ENCODED_CLOSE_PAREN = "%29"
ENCODED_COMMA = "%2C"
ENCODED_COLON = "%3A"
ENCODED_SEMICOLON = "%3B"
NUMBER_PRECISION = 10  # Decimal places kept when printing alpha/opacity values

# Template placeholders written by the external icon generator
FILL_PLACEHOLDER = "%FILL%"
STROKE_PLACEHOLDER = "%STROKE%"
STYLES_PLACEHOLDER = "%STYLES%"
MANIFEST_ICONS_KEY = "icons"

# Background shorthand defaults
DEFAULT_BACKGROUND_POSITION = "left center"
DEFAULT_BACKGROUND_SIZE = "2em 2em"
DEFAULT_BACKGROUND_REPEAT = "no-repeat"

# Color constants
DEFAULT_COLOR = "black"
CHANNEL_MAX = 255
CSS_COLOR_KEYWORDS: dict[str, tuple[int, int, int, float]] = {
    "black": (0, 0, 0, 1.0),
    "silver": (192, 192, 192, 1.0),
    "gray": (128, 128, 128, 1.0),
    "grey": (128, 128, 128, 1.0),
    "white": (255, 255, 255, 1.0),
    "maroon": (128, 0, 0, 1.0),
    "red": (255, 0, 0, 1.0),
    "purple": (128, 0, 128, 1.0),
    "fuchsia": (255, 0, 255, 1.0),
    "green": (0, 128, 0, 1.0),
    "lime": (0, 255, 0, 1.0),
    "olive": (128, 128, 0, 1.0),
    "yellow": (255, 255, 0, 1.0),
    "navy": (0, 0, 128, 1.0),
    "blue": (0, 0, 255, 1.0),
    "teal": (0, 128, 128, 1.0),
    "aqua": (0, 255, 255, 1.0),
    "orange": (255, 165, 0, 1.0),
    "transparent": (0, 0, 0, 0.0),
}

# Logging constants
BYTES_PER_MEGABYTE = 1024 * 1024
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "text")
