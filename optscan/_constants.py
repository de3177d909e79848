"""Constants and configuration for optscan.

This module centralizes all constants and environment variable configuration
for optscan. Constants are immutable values that control the scanner's token
codes, the optstring grammar, and the usage printer layout.

Environment Variables:
    See the load_config() function for a complete list of supported environment
    variables and their default values.

Usage:
    from optscan._constants import END_OF_OPTIONS, load_config

    # Use constants directly
    while scanner.scan_short(argv, "ab:") != END_OF_OPTIONS:
       #....

    # Load configuration once at module level
    _config = load_config()
    width = _config["OPTSCAN_OPTION_WIDTH"]

"""

import os
import re
from typing import Any, Final, Literal

# ==============================================================================
# VERSION INFORMATION
# ==============================================================================

__version__: Final[str] = "0.1.0"
"""Current version of optscan."""

# ==============================================================================
# PROGRAM IDENTIFICATION
# ==============================================================================

PROG_NAME: Final[str] = "optscan"
"""Program name used in CLI help and error messages."""

# ==============================================================================
# EXIT CODES
# ==============================================================================

EXIT_SUCCESS: Final[int] = 0
"""Exit code for successful operations."""

EXIT_ERROR: Final[int] = 1
"""Exit code for general errors (including rejected command-line options)."""

EXIT_USAGE: Final[int] = 2
"""Exit code for a malformed option specification."""

# ==============================================================================
# SCANNER TOKENS
# ==============================================================================

END_OF_OPTIONS: Final[int] = -1
"""Returned when there are no more options to scan."""

NON_OPTION: Final[int] = 1
"""Returned for a non-option element when the optstring starts with '-'."""

UNRECOGNIZED: Final[str] = "?"
"""Returned for an unknown option (and a missing argument outside ':' mode)."""

MISSING_ARGUMENT: Final[str] = ":"
"""Returned for a missing required argument when the optstring starts with ':'."""

NO_LONG_INDEX: Final[int] = -1
"""Long-option index reported when no long option matched."""

# ==============================================================================
# OPTSTRING GRAMMAR
# ==============================================================================

MODE_STOP_AT_NON_OPTION: Final[Literal["+"]] = "+"
"""Leading optstring character: stop scanning at the first non-option."""

MODE_RETURN_IN_ORDER: Final[Literal["-"]] = "-"
"""Leading optstring character: return non-options as NON_OPTION tokens."""

MODE_SILENT: Final[Literal[":"]] = ":"
"""Leading optstring character: report missing arguments as MISSING_ARGUMENT."""

OPTSTRING_MODES: Final[tuple[str, ...]] = (
    MODE_STOP_AT_NON_OPTION,
    MODE_RETURN_IN_ORDER,
    MODE_SILENT,
)
"""All recognised leading mode characters."""

OPTSTRING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^([+]|-|:)?([A-Za-z0-9]:?:?)*$"
)
"""Grammar every optstring must match."""

SHORT_OPTION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9]$")
"""Characters usable as a short option."""

TERMINATOR: Final[str] = "--"
"""Argument that ends option scanning."""

# ==============================================================================
# USAGE PRINTER DEFAULTS
# ==============================================================================

DEFAULT_OPTION_WIDTH: Final[int] = 32
"""Width of the option column in usage output."""

DEFAULT_ARG_LABEL: Final[str] = "ARG"
"""Label printed for option arguments when none is configured."""

DEFAULT_GROUP_TITLE: Final[str] = "Options"
"""Header used when all options are printed as a single group."""


def _parse_bool(value: str | None) -> bool:
    """Parse a boolean value from environment variable string.

    Args:
        value: String value from environment variable

    Returns:
        False if value is None, null, empty, "0", "f", "F", "false", "False", "FALSE"
        True otherwise (for any non-empty string not in the false list)
    """
    if not value:
        return False

    # Values that should be considered False
    false_values = {"0", "F", "NONE", "NULL", "FALSE"}
    return value.upper() not in false_values


def _load_optscan_env_vars() -> dict[str, Any]:
    """Load optscan configuration from environment variables.

    Returns:
        Dict with OPTSCAN_* configuration values and the POSIXLY_CORRECT signal
    """
    width_value = DEFAULT_OPTION_WIDTH
    raw_width = os.environ.get("OPTSCAN_OPTION_WIDTH")
    if raw_width is not None:
        try:
            parsed = int(raw_width)
            if parsed >= 1:
                width_value = parsed
        except ValueError:
            width_value = DEFAULT_OPTION_WIDTH

    return {
        # Debug - uses flexible boolean parsing
        "OPTSCAN_DEBUG": _parse_bool(os.environ.get("OPTSCAN_DEBUG")),
        # Logging - strict "1" check
        "OPTSCAN_LOGGING_ENABLED": os.environ.get("OPTSCAN_LOGGING_ENABLED", "0")
        == "1",
        "OPTSCAN_OPTION_WIDTH": width_value,
        # glibc only checks whether the variable is set, not its value
        "POSIXLY_CORRECT": os.environ.get("POSIXLY_CORRECT") is not None,
    }


def load_environment() -> dict[str, Any]:
    """Load configuration from environment variables.

    This function reads all optscan environment variables and returns
    a configuration dictionary with validated values.

    Returns:
        dict: Configuration dictionary with the following keys:

            OPTSCAN_DEBUG (bool): Enable debug output.
                Default: False
                False for: empty, "0", "f", "F", "false", "False", "FALSE"
                True for: any other non-empty value (e.g., "1", "true", "yes")

            OPTSCAN_LOGGING_ENABLED (bool): Enable logging output.
                Default: False (disabled)
                Set to "1" to enable logging through Python's logging module.

            OPTSCAN_OPTION_WIDTH (int): Width of the usage option column.
                Default: 32. Invalid or non-positive values fall back to it.

            POSIXLY_CORRECT (bool): True when the POSIXLY_CORRECT variable
                is present in the environment, whatever its value.
    """
    return _load_optscan_env_vars()


def load_config() -> dict[str, Any]:
    """Public entry point for retrieving the current configuration.

    Returns:
        A fresh configuration dictionary.

    Notes:
        The returned dictionary is not cached; callers should cache it themselves
        if repeated lookups are required.
    """
    return load_environment()


def reload_environment(config: dict[str, Any]) -> dict[str, Any]:
    """Reload the environment variables and update the configuration.

    Args:
        config: The current configuration dictionary.

    Returns:
        The updated configuration dictionary with reloaded environment variables.
    """
    config.update(load_environment())
    return config
