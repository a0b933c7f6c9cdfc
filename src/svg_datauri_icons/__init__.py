"""SVG icons rendered as color-parameterized CSS data URIs."""

__version__ = "0.1.0"
