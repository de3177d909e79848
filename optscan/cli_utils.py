"""CLI helper utilities for getopt(1)-style argument processing."""

from __future__ import annotations

import re

from optscan.core.options import ArgFlags, OptionSpec

LONG_ONLY_VAL_BASE = 256
"""First value handed to long options declared on the command line.

Values above the character range cannot collide with a short option.
"""

_SEPARATORS = re.compile(r"[,\s]+")


class LongOptionListError(ValueError):
    """Raised when a long-option list is incorrectly specified."""


def parse_long_options(spec: str) -> list[OptionSpec]:
    """Parse a getopt(1) long-option list such as ``"verbose,output:,color::"``.

    Names are separated by commas or whitespace. A trailing ``:`` marks a
    required argument, ``::`` an optional one.
    """
    options: list[OptionSpec] = []
    for raw in _SEPARATORS.split(spec.strip()):
        if not raw:
            continue
        name = raw.rstrip(":")
        colons = len(raw) - len(name)
        if not name or "=" in name or colons > 2:
            raise LongOptionListError(f"invalid long option '{raw}'")
        if colons == 2:
            has_arg = ArgFlags.OPTIONAL
        elif colons == 1:
            has_arg = ArgFlags.REQUIRED
        else:
            has_arg = ArgFlags.NONE
        options.append(
            OptionSpec(
                name=name, has_arg=has_arg, val=LONG_ONLY_VAL_BASE + len(options)
            )
        )
    return options


def shell_quote(value: str) -> str:
    """Quote *value* for ``eval set --`` the way getopt(1) does.

    Example:
        >>> shell_quote("it's")
        "'it'\\\\''s'"
    """
    return "'" + value.replace("'", "'\\''") + "'"


__all__ = ["parse_long_options", "shell_quote", "LongOptionListError"]
