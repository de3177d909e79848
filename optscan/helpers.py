"""Helper utility functions for optscan.

This module provides the logging and debugging helpers used throughout the
optscan codebase. They respect the environment configuration so the scanner
stays silent unless logging or debugging has been switched on.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from optscan._constants import PROG_NAME, load_config

# Load configuration once at module level for efficiency
_config = load_config()

# Set up module logger
logger = logging.getLogger(__name__)


def send_log(
    message: str,
    level: int = logging.INFO,
    logger_name: str | None = None,
    **kwargs: Any,
) -> None:
    """Send a log message if logging is enabled.

    This function checks the OPTSCAN_LOGGING_ENABLED configuration and only
    logs if it's enabled. This allows for conditional logging throughout
    the codebase without repeated environment checks.

    Args:
        message: The message to log
        level: The logging level (default: logging.INFO)
        logger_name: Optional logger name. If None, uses the module logger
        **kwargs: Additional keyword arguments to pass to the logging function
                 (e.g., exc_info, stack_info, stacklevel)

    Example:
        >>> send_log("Permuted operand", level=logging.DEBUG)
        >>> send_log("Custom logger message", logger_name="optscan.core")
    """
    if not _config["OPTSCAN_LOGGING_ENABLED"]:
        return

    if logger_name:
        log = logging.getLogger(logger_name)
    else:
        log = logger

    log.log(level, message, **kwargs)


def debug_print(
    *args: Any,
    sep: str = " ",
    end: str = "\n",
    file: Any = None,
    flush: bool = False,
) -> None:
    """Print debug output if debugging is enabled.

    This function checks the OPTSCAN_DEBUG configuration and only prints
    if debugging is enabled. It has the same signature as the built-in
    print() function for easy drop-in replacement.

    Args:
        *args: Values to print
        sep: String inserted between values (default: " ")
        end: String appended after the last value (default: "\\n")
        file: File object to write to (default: sys.stderr for debug output)
        flush: Whether to forcibly flush the stream (default: False)
    """
    if not _config["OPTSCAN_DEBUG"]:
        return

    if file is None:
        file = sys.stderr

    print(*args, sep=sep, end=end, file=file, flush=flush)


def log_debug(message: str, **kwargs: Any) -> None:
    """Convenience function for debug-level logging.

    Equivalent to send_log(message, level=logging.DEBUG, **kwargs)
    """
    send_log(message, level=logging.DEBUG, **kwargs)


def log_info(message: str, **kwargs: Any) -> None:
    """Convenience function for info-level logging.

    Equivalent to send_log(message, level=logging.INFO, **kwargs)
    """
    send_log(message, level=logging.INFO, **kwargs)


def log_warning(message: str, **kwargs: Any) -> None:
    """Convenience function for warning-level logging.

    Equivalent to send_log(message, level=logging.WARNING, **kwargs)
    """
    send_log(message, level=logging.WARNING, **kwargs)


def log_error(message: str, **kwargs: Any) -> None:
    """Convenience function for error-level logging.

    Equivalent to send_log(message, level=logging.ERROR, **kwargs)
    """
    send_log(message, level=logging.ERROR, **kwargs)


def get_config() -> dict[str, Any]:
    """Return the configuration loaded at import (or by the last reload)."""
    return _config


def reload_config() -> None:
    """Reload configuration from environment variables.

    This function is primarily useful for testing or when environment
    variables might have changed during runtime.
    """
    global _config
    _config = load_config()


def program_name(argv0: str | None) -> str:
    """Return the basename of *argv0* for use in diagnostics.

    Example:
        >>> program_name("/usr/local/bin/tar")
        'tar'
        >>> program_name("")
        'optscan'
    """
    if not argv0:
        return PROG_NAME
    return os.path.basename(argv0.rstrip("/\\")) or PROG_NAME
