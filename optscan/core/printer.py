"""Render a grouped options summary for ``--help`` output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from optscan._constants import DEFAULT_ARG_LABEL, DEFAULT_GROUP_TITLE
from optscan.core.options import ArgFlags, OptionExtra
from optscan.helpers import get_config


class UsagePrinter:
    """Format usage text for a list of options.

    Args:
        usage: Command format shown after ``Usage:``.
        options: Options to describe.
        groups: Group names to print, in order. When empty, every option is
            printed under a single ``Options`` header.
        option_width: Width of the option column. Defaults to the
            ``OPTSCAN_OPTION_WIDTH`` setting.
    """

    def __init__(
        self,
        usage: str,
        options: Sequence[OptionExtra],
        groups: Sequence[str] = (),
        *,
        option_width: int | None = None,
    ) -> None:
        self.usage = usage
        self.options = list(options)
        self.groups = list(groups)
        if option_width is None:
            option_width = int(get_config()["OPTSCAN_OPTION_WIDTH"])
        self.option_width = option_width

    def format_option(self, extra: OptionExtra) -> str:
        """Return the padded option column followed by the description."""
        spec = extra.option
        label = extra.arg_label if extra.arg_label is not None else DEFAULT_ARG_LABEL
        forms: list[str] = []

        char = spec.short_char
        if char is not None:
            short = f"-{char}"
            if spec.has_arg is ArgFlags.REQUIRED:
                short += f" {label}"
            elif spec.has_arg is ArgFlags.OPTIONAL:
                short += f" [{label}]"
            forms.append(short)

        if spec.is_long or char is None:
            long = f"--{spec.name}"
            if spec.has_arg is ArgFlags.REQUIRED:
                long += f"={label}"
            elif spec.has_arg is ArgFlags.OPTIONAL:
                long += f"=[{label}]"
            forms.append(long)

        column = "  " + ", ".join(forms)
        return f"{column.ljust(self.option_width)}{extra.description}"

    def format_group(self, group: str | None) -> str:
        """Return the block for *group*, or ``""`` if it has no options.

        ``None`` selects every option under the default header.
        """
        if group is None:
            selected = self.options
        else:
            selected = [extra for extra in self.options if extra.group == group]
        if not selected:
            return ""

        lines = [f"{group if group is not None else DEFAULT_GROUP_TITLE}:"]
        lines.extend(self.format_option(extra) for extra in selected)
        return "\n".join(lines) + "\n\n"

    def format_usage(self) -> str:
        blocks = [f"Usage: {self.usage}\n\n"]
        if self.groups:
            blocks.extend(self.format_group(group) for group in self.groups)
        else:
            blocks.append(self.format_group(None))
        return "".join(blocks)

    def print_group(self, group: str | None, file: TextIO | None = None) -> None:
        text = self.format_group(group)
        if text:
            (file if file is not None else sys.stdout).write(text)

    def print_usage(self, file: TextIO | None = None) -> None:
        (file if file is not None else sys.stdout).write(self.format_usage())
