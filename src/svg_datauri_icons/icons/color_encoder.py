"""Color encoding for data-URI payloads.

Turns a Color into the shortest rgb()/rgba() notation that can sit inside a
data URI. Only the parentheses and commas are percent-encoded.
"""

import math

from svg_datauri_icons.constants import (
    ENCODED_CLOSE_PAREN,
    ENCODED_COMMA,
    ENCODED_OPEN_PAREN,
    NUMBER_PRECISION,
)
from svg_datauri_icons.models.color import Color


def format_number(value: float) -> str:
    """Print a number as a plain decimal without trailing zeros.

    Args:
        value: Number to print.

    Returns:
        The number as text, e.g. ``0.5``, ``1`` or ``0.125``. Never uses
        exponent notation.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    text = f"{value:.{NUMBER_PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _round_channel(value: float) -> int:
    # Half-up: 126.5 -> 127, unlike round()
    return int(math.floor(value + 0.5))


def encode_color(color: Color) -> str:
    """Encode a color for use inside a data URI.

    Args:
        color: Color to encode.

    Returns:
        ``rgb%28R%2CG%2CB%29`` when alpha is exactly 1, otherwise
        ``rgba%28R%2CG%2CB%2CA%29``.
    """
    channels = [str(_round_channel(c)) for c in (color.red, color.green, color.blue)]

    if color.is_opaque:
        return f"rgb{ENCODED_OPEN_PAREN}{ENCODED_COMMA.join(channels)}{ENCODED_CLOSE_PAREN}"

    channels.append(format_number(color.alpha))
    return f"rgba{ENCODED_OPEN_PAREN}{ENCODED_COMMA.join(channels)}{ENCODED_CLOSE_PAREN}"
