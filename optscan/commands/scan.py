"""getopt(1)-style normalisation of a command line."""

from __future__ import annotations

import io
import json

from optscan._constants import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE,
    MISSING_ARGUMENT,
    NO_LONG_INDEX,
    NON_OPTION,
    PROG_NAME,
    TERMINATOR,
    UNRECOGNIZED,
)
from optscan.cli_utils import LongOptionListError, parse_long_options, shell_quote
from optscan.core.scanner import OptionScanner, SpecificationError
from optscan.helpers import log_debug, log_error


def cmd_scan(
    args: list[str],
    *,
    optstring: str = "",
    longoptions: str | None = None,
    name: str | None = None,
    quiet: bool = False,
    posix: bool = False,
    json_output: bool = False,
) -> tuple[int, str, str]:
    """Scan *args* and render them in canonical getopt(1) form.

    Returns:
        ``(exit_code, payload, diagnostics)``. The payload lists each option
        followed by its quoted argument, then ``--`` and the quoted operands.
        The exit code is ``EXIT_ERROR`` when any option was rejected and
        ``EXIT_USAGE`` when the option specification itself is malformed.
    """
    prog = name or PROG_NAME
    try:
        longopts = parse_long_options(longoptions) if longoptions else []
    except LongOptionListError as exc:
        log_error(f"Rejected long-option list {longoptions!r}: {exc}")
        return EXIT_USAGE, "", f"{prog}: {exc}"

    diagnostics = io.StringIO()
    scanner = OptionScanner(print_errors=not quiet, error_stream=diagnostics)
    if posix:
        scanner.posixly_correct = True

    argv = [prog, *args]
    parsed: list[tuple[str | None, str | None]] = []
    failed = False

    try:
        for result in scanner.iter_options(argv, optstring, longopts):
            if result.token in (UNRECOGNIZED, MISSING_ARGUMENT):
                failed = True
                continue
            if result.token == NON_OPTION:
                parsed.append((None, result.argument))
            elif result.long_index != NO_LONG_INDEX:
                long_name = longopts[result.long_index].name
                parsed.append((f"--{long_name}", result.argument))
            else:
                parsed.append((f"-{result.token}", result.argument))
    except SpecificationError as exc:
        log_error(str(exc))
        return EXIT_USAGE, "", f"{prog}: {exc}"

    operands = argv[scanner.next_index :]
    stepped_past = scanner.next_index > 1 and argv[scanner.next_index - 1] == TERMINATOR
    if scanner.state.terminated and operands == [TERMINATOR] and not stepped_past:
        # the scanner stays on a "--" that ends argv
        operands = []
    exit_code = EXIT_ERROR if failed else EXIT_SUCCESS
    log_debug(f"Scanned {len(parsed)} options and {len(operands)} operands")

    if json_output:
        payload = json.dumps(
            {
                "options": [
                    {"option": option, "argument": argument}
                    for option, argument in parsed
                ],
                "operands": operands,
                "ok": not failed,
            },
            indent=2,
        )
    else:
        words: list[str] = []
        for option, argument in parsed:
            if option is not None:
                words.append(option)
            if argument is not None:
                words.append(shell_quote(argument))
        words.append("--")
        words.extend(shell_quote(operand) for operand in operands)
        payload = " " + " ".join(words)

    return exit_code, payload, diagnostics.getvalue().rstrip("\n")
