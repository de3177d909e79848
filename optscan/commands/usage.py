"""Render usage text from an option list document."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from optscan._constants import EXIT_ERROR, EXIT_SUCCESS
from optscan.core.options import OptionList
from optscan.core.printer import UsagePrinter
from optscan.helpers import log_info, log_warning


def load_option_list(file_path: Path) -> OptionList:
    """Read and validate an option list JSON file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the document is not a valid option list.
    """
    return OptionList.from_json(file_path.read_text(encoding="utf-8"))


def cmd_usage(
    file_path: Path,
    *,
    groups: list[str] | None = None,
    width: int | None = None,
) -> tuple[int, str]:
    """Return ``(exit_code, text)`` for the usage block described by *file_path*.

    *groups* overrides the group order stored in the document.
    """
    try:
        option_list = load_option_list(file_path)
    except OSError as exc:
        return EXIT_ERROR, f"Error reading file: {exc}"
    except ValidationError as exc:
        log_warning(f"Rejected option list {file_path}: {exc.error_count()} errors")
        return EXIT_ERROR, f"Invalid option list {file_path}:\n{exc}"

    printer = UsagePrinter(
        option_list.usage,
        option_list.options,
        groups if groups else option_list.groups,
        option_width=width,
    )
    log_info(f"Rendering usage for {file_path}")
    return EXIT_SUCCESS, printer.format_usage().rstrip("\n")
