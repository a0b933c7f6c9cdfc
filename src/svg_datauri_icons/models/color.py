"""Color model used for icon tints.

Defines an immutable four-channel color and the parser that turns the
values found in configuration files and stylesheet templates into it.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from svg_datauri_icons.constants import CHANNEL_MAX, CSS_COLOR_KEYWORDS
from svg_datauri_icons.exceptions import InvalidColorError

_FUNCTION_RE = re.compile(r"^rgba?\((?P<args>[^()]*)\)$")
_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_SEPARATOR_RE = re.compile(r"\s*[,/]\s*|\s+")


class Color(BaseModel):
    """RGBA color value.

    Channels are not range-checked here; red, green and blue are expected in
    0-255 and alpha in 0.0-1.0.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def is_opaque(self) -> bool:
        """Whether the alpha channel is exactly 1."""
        return self.alpha == 1

    @classmethod
    def parse(cls, value: Any) -> "Color":
        """Interpret a value as a color.

        Accepts an existing Color, an (r, g, b) or (r, g, b, a) sequence,
        a hex string (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba()
        functional notation, or a basic CSS color keyword.

        Args:
            value: Value to interpret.

        Returns:
            The parsed color.

        Raises:
            InvalidColorError: If the value is not a recognized color.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, tuple | list):
            return cls._from_sequence(value)
        if isinstance(value, str):
            return cls._from_string(value)
        raise InvalidColorError("Unrecognized color value", {"value": repr(value)})

    @classmethod
    def _from_sequence(cls, value: tuple[Any, ...] | list[Any]) -> "Color":
        if len(value) not in (3, 4) or not all(_is_number(item) for item in value):
            raise InvalidColorError("Color sequences need 3 or 4 numbers", {"value": repr(value)})
        return cls._build(value, *value)

    @classmethod
    def _from_string(cls, value: str) -> "Color":
        text = value.strip().lower()

        if text in CSS_COLOR_KEYWORDS:
            red, green, blue, alpha = CSS_COLOR_KEYWORDS[text]
            return cls(red=red, green=green, blue=blue, alpha=alpha)

        hex_match = _HEX_RE.match(text)
        if hex_match:
            return cls._from_hex(hex_match.group("digits"))

        function_match = _FUNCTION_RE.match(text)
        if function_match:
            parts = [p for p in _SEPARATOR_RE.split(function_match.group("args").strip()) if p]
            if len(parts) in (3, 4):
                try:
                    channels = [_parse_channel(p) for p in parts[:3]]
                    alpha = _parse_alpha(parts[3]) if len(parts) == 4 else 1.0
                except ValueError as e:
                    raise InvalidColorError("Unrecognized color value", {"value": value}) from e
                return cls._build(value, *channels, alpha)

        raise InvalidColorError("Unrecognized color value", {"value": value})

    @classmethod
    def _build(cls, value: Any, red: float, green: float, blue: float, alpha: float = 1.0) -> "Color":
        # NaN and infinite channels are rejected by the model
        try:
            return cls(red=red, green=green, blue=blue, alpha=alpha)
        except ValidationError as e:
            raise InvalidColorError("Unrecognized color value", {"value": repr(value)}) from e

    @classmethod
    def _from_hex(cls, digits: str) -> "Color":
        # Short forms double every digit: #abc -> #aabbcc
        if len(digits) in (3, 4):
            digits = "".join(d * 2 for d in digits)
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / CHANNEL_MAX if len(digits) == 8 else 1.0
        return cls(red=red, green=green, blue=blue, alpha=alpha)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _parse_channel(text: str) -> float:
    if text.endswith("%"):
        return float(text[:-1]) * CHANNEL_MAX / 100
    return float(text)


def _parse_alpha(text: str) -> float:
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)
