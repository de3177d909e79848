"""Core components of the optscan option scanner."""

from .options import ArgFlags, OptionExtra, OptionList, OptionSpec, validate_option_list
from .printer import UsagePrinter
from .scanner import (
    OptionScanner,
    ScanResult,
    ScanState,
    SpecificationError,
    is_long_option,
    is_option,
    parse_optstring,
)
from .transformer import OptionTransformer

__all__ = [
    "OptionScanner",
    "ScanState",
    "ScanResult",
    "SpecificationError",
    "parse_optstring",
    "is_option",
    "is_long_option",
    "ArgFlags",
    "OptionSpec",
    "OptionExtra",
    "OptionList",
    "validate_option_list",
    "OptionTransformer",
    "UsagePrinter",
]
