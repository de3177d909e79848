"""Command handlers exposed via the `optscan.commands` package."""

from .scan import cmd_scan
from .usage import cmd_usage, load_option_list
from .validate_options import cmd_validate_options

__all__ = [
    "cmd_scan",
    "cmd_usage",
    "cmd_validate_options",
    "load_option_list",
]
