"""optscan: glibc-compatible command-line option scanning.

A Python implementation of getopt/getopt_long with GNU argument permutation,
plus helpers to build option specifications and print usage text.
"""

from ._constants import (
    END_OF_OPTIONS,
    MISSING_ARGUMENT,
    NON_OPTION,
    PROG_NAME,
    UNRECOGNIZED,
    __version__,
)
from .core import (
    ArgFlags,
    OptionExtra,
    OptionScanner,
    OptionSpec,
    OptionTransformer,
    SpecificationError,
    UsagePrinter,
)
from .helpers import (
    debug_print,
    log_debug,
    log_error,
    log_info,
    log_warning,
    send_log,
)

__all__ = [
    "__version__",
    "PROG_NAME",
    "END_OF_OPTIONS",
    "NON_OPTION",
    "UNRECOGNIZED",
    "MISSING_ARGUMENT",
    "ArgFlags",
    "OptionSpec",
    "OptionExtra",
    "OptionScanner",
    "OptionTransformer",
    "SpecificationError",
    "UsagePrinter",
    "debug_print",
    "send_log",
    "log_debug",
    "log_info",
    "log_warning",
    "log_error",
]
