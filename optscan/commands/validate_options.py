"""Validate an option list document and summarise the scanner inputs."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from optscan.core.options import OptionList, validate_option_list
from optscan.core.transformer import OptionTransformer
from optscan.helpers import log_info

console = Console()


def cmd_validate_options(file_path: Path) -> None:
    """Validate an option list JSON file.

    Args:
        file_path: Path to the option list JSON file to validate
    """
    try:
        json_content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error reading file:[/red] {e}")
        sys.exit(1)

    is_valid, errors = validate_option_list(json_content)
    if not is_valid:
        console.print("[red]✗[/red] Option list validation failed\n")
        _display_validation_errors(errors)
        sys.exit(1)

    option_list = OptionList.from_json(json_content)
    transformer = OptionTransformer(option_list.options)
    optstring = transformer.to_optstring()
    log_info(f"Validated option list {file_path}: {len(option_list.options)} entries")

    console.print("[green]✓[/green] Option list is valid")
    _display_summary(option_list, optstring, transformer)


def _display_summary(
    option_list: OptionList, optstring: str, transformer: OptionTransformer
) -> None:
    """Display the derived optstring and long-option table."""
    table = Table(title="Scanner Inputs", show_header=True)
    table.add_column("Short", style="cyan")
    table.add_column("Long", style="cyan")
    table.add_column("Argument")
    table.add_column("Value")
    table.add_column("Group")

    for extra in option_list.options:
        spec = extra.option
        table.add_row(
            f"-{spec.short_char}" if spec.short_char else "",
            f"--{spec.name}" if spec.is_long else "",
            spec.has_arg.name.lower(),
            repr(spec.val),
            extra.group or "",
        )

    console.print()
    console.print(f"optstring: {optstring!r}", markup=False)
    console.print(f"long options: {len(transformer.to_long_opts())}")
    console.print(table)


def _display_validation_errors(errors: dict[str, str]) -> None:
    """Display validation errors in a formatted table."""
    table = Table(title="Validation Errors", show_header=True)
    table.add_column("Field", style="yellow")
    table.add_column("Error", style="red")

    for field, error in errors.items():
        table.add_row(field, error)

    console.print(table)
