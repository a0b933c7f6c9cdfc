"""Early error handler for CLI failures before logging is configured.

Writes critical errors to stderr so they are visible even when the logging
system has not been set up yet (for example when the config file is broken).
"""

import sys
from datetime import datetime
from typing import Any


def handle_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Handle errors that occur before logging is configured.

    Args:
        error_type: Type of error (e.g., "CONFIG_ERROR", "MANIFEST_ERROR")
        message: Main error message
        details: Optional dictionary of additional error details
    """
    timestamp = datetime.now().isoformat()

    sys.stderr.write(f"\n[{timestamp}] {error_type}: {message}\n")

    if details:
        sys.stderr.write("Details:\n")
        for key, value in details.items():
            sys.stderr.write(f"  {key}: {value}\n")

    sys.stderr.flush()
