"""Convert a declarative option list into scanner inputs."""

from __future__ import annotations

from collections.abc import Sequence

from optscan._constants import OPTSTRING_MODES
from optscan.core.options import ArgFlags, OptionExtra, OptionSpec
from optscan.core.scanner import SpecificationError, parse_optstring


class OptionTransformer:
    """Build the optstring and long-option table for a list of options."""

    def __init__(self, options: Sequence[OptionExtra]) -> None:
        self._options = list(options)

    @property
    def options(self) -> list[OptionExtra]:
        return list(self._options)

    def to_long_opts(self) -> list[OptionSpec]:
        """Return the options that have a long name, in declaration order."""
        return [extra.option for extra in self._options if extra.option.is_long]

    def to_optstring(self, mode: str = "") -> str:
        """Return a getopt-compatible optstring.

        Args:
            mode: Optional leading mode character (``+``, ``-`` or ``:``).

        Raises:
            SpecificationError: If *mode* is not a recognised mode character.

        Options whose value is not a letter or digit have no short form and are
        left out.
        """
        if mode and mode not in OPTSTRING_MODES:
            raise SpecificationError(mode)

        parts = [mode]
        for extra in self._options:
            char = extra.option.short_char
            if char is None:
                continue
            parts.append(char)
            if extra.option.has_arg is ArgFlags.REQUIRED:
                parts.append(":")
            elif extra.option.has_arg is ArgFlags.OPTIONAL:
                parts.append("::")

        optstring = "".join(parts)
        parse_optstring(optstring)
        return optstring
