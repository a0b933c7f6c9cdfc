"""Module initialization."""

from svg_datauri_icons.utils.early_error_handler import handle_startup_error
from svg_datauri_icons.utils.file_utils import (
    ensure_dir_exists,
    file_exists,
    normalize_path,
    read_text,
    write_text,
)

__all__ = [
    # File utilities
    "ensure_dir_exists",
    "file_exists",
    "normalize_path",
    "read_text",
    "write_text",
    # Startup errors
    "handle_startup_error",
]
