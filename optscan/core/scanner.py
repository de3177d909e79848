"""glibc-compatible command-line option scanner.

``OptionScanner`` walks an argument vector one option per call, the way
``getopt(3)`` and ``getopt_long(3)`` do::

    scanner = OptionScanner()
    while (opt := scanner.scan_short(argv, "abc:d::")) != END_OF_OPTIONS:
        if opt == "c":
            print(scanner.argument)

GNU extensions are supported: argument permutation, the ``+``, ``-`` and
``:`` optstring prefixes, optional arguments and ``POSIXLY_CORRECT``.
``getopt_long_only`` and the ``-W foo`` long-option syntax are not.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import NamedTuple, TextIO

from optscan._constants import (
    END_OF_OPTIONS,
    MISSING_ARGUMENT,
    MODE_RETURN_IN_ORDER,
    MODE_SILENT,
    MODE_STOP_AT_NON_OPTION,
    NO_LONG_INDEX,
    NON_OPTION,
    OPTSTRING_MODES,
    OPTSTRING_PATTERN,
    TERMINATOR,
    UNRECOGNIZED,
    load_config,
)
from optscan.core.options import ArgFlags, OptionSpec
from optscan.helpers import log_debug, program_name

Token = str | int


class SpecificationError(ValueError):
    """Raised when an optstring does not match the option grammar."""

    def __init__(self, optstring: str) -> None:
        super().__init__(f"Bad option string: {optstring!r}")
        self.optstring = optstring


@dataclass
class ScanState:
    """Mutable cursor of one scanning session."""

    next_char: int = 0
    next_index: int = 1
    argument: str | None = None
    option_char: Token = ""
    print_errors: bool = True
    posixly_correct: bool = False
    terminated: bool = False
    permuted: int = 0
    """Operands moved to the end of argv and not yet put back in order."""


class ScanResult(NamedTuple):
    """One option reported by :meth:`OptionScanner.iter_options`."""

    token: Token
    argument: str | None
    long_index: int
    option_char: Token


def is_option(arg: str) -> bool:
    return arg.startswith("-") and arg != "-"


def is_long_option(arg: str) -> bool:
    """Only meaningful for arguments that already passed :func:`is_option`."""
    return arg.startswith("--") and arg != TERMINATOR


def optstring_mode(optstring: str) -> str:
    """Return the leading mode character of *optstring*, or ``""``."""
    head = optstring[:1]
    return head if head in OPTSTRING_MODES else ""


def parse_optstring(optstring: str) -> list[OptionSpec]:
    """Expand an optstring into one single-character OptionSpec per letter.

    One trailing colon marks a required argument, two an optional one.

    Raises:
        SpecificationError: If *optstring* does not match the grammar.
    """
    if not OPTSTRING_PATTERN.fullmatch(optstring):
        raise SpecificationError(optstring)

    body = optstring[len(optstring_mode(optstring)) :]
    specs: list[OptionSpec] = []
    i = 0
    while i < len(body):
        char = body[i]
        has_arg = ArgFlags.NONE
        if body[i + 1 : i + 3] == "::":
            has_arg = ArgFlags.OPTIONAL
            i += 2
        elif body[i + 1 : i + 2] == ":":
            has_arg = ArgFlags.REQUIRED
            i += 1
        specs.append(OptionSpec(name=char, has_arg=has_arg, val=char))
        i += 1
    return specs


class OptionScanner:
    """Incremental getopt/getopt_long scanner.

    The instance owns a :class:`ScanState` that persists between calls. It is
    not thread-safe, and the argv passed in is permuted in place, so it must
    not be shared with other readers while a session is running.

    Args:
        posixly_correct: Stop at the first non-option. ``None`` reads the
            ``POSIXLY_CORRECT`` environment signal once, here.
        print_errors: Write diagnostics for bad options.
        error_stream: Destination for diagnostics (default ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        posixly_correct: bool | None = None,
        print_errors: bool = True,
        error_stream: TextIO | None = None,
    ) -> None:
        if posixly_correct is None:
            posixly_correct = bool(load_config()["POSIXLY_CORRECT"])
        self._state = ScanState(
            print_errors=print_errors, posixly_correct=posixly_correct
        )
        self._error_stream = error_stream

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def next_char(self) -> int:
        """Index of the option character being read inside the current element."""
        return self._state.next_char

    @property
    def next_index(self) -> int:
        """Index of the next argv element to examine."""
        return self._state.next_index

    @next_index.setter
    def next_index(self, value: int) -> None:
        self._state.next_index = value
        self._state.next_char = 0
        self._state.terminated = False
        self._state.permuted = 0

    @property
    def argument(self) -> str | None:
        """Argument of the last option, or the operand in ``-`` mode."""
        return self._state.argument

    @property
    def option_char(self) -> Token:
        """Unrecognised option character, or the option missing its argument."""
        return self._state.option_char

    @property
    def print_errors(self) -> bool:
        return self._state.print_errors

    @print_errors.setter
    def print_errors(self, value: bool) -> None:
        self._state.print_errors = value

    @property
    def posixly_correct(self) -> bool:
        return self._state.posixly_correct

    @posixly_correct.setter
    def posixly_correct(self, value: bool) -> None:
        self._state.posixly_correct = value

    def reset(self) -> None:
        """Rewind the session so the next call starts again at ``argv[1]``."""
        self.next_index = 1
        self._state.argument = None
        self._state.option_char = ""

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def scan_short(self, argv: MutableSequence[str], optstring: str) -> Token:
        """Return the next short option from *argv* (``getopt``)."""
        token, _ = self.scan_long(argv, optstring, ())
        return token

    def scan_long(
        self,
        argv: MutableSequence[str],
        optstring: str,
        longopts: Sequence[OptionSpec] = (),
    ) -> tuple[Token, int]:
        """Return the next option from *argv* and its index in *longopts*.

        Returns:
            ``(token, long_index)``. ``token`` is the matched option's ``val``,
            ``END_OF_OPTIONS``, ``UNRECOGNIZED``, ``MISSING_ARGUMENT`` or
            ``NON_OPTION``. ``long_index`` is the position of the matched long
            option, or ``NO_LONG_INDEX``.

        Raises:
            SpecificationError: If *optstring* is malformed.
        """
        short_table = {spec.name: spec for spec in parse_optstring(optstring)}
        mode = optstring_mode(optstring)
        state = self._state

        state.argument = None
        if state.next_index < 1:
            state.next_index = 1
            state.next_char = 0
        if state.terminated:
            return END_OF_OPTIONS, NO_LONG_INDEX

        while state.next_index < len(argv):
            current = argv[state.next_index]

            if current == TERMINATOR:
                self._restore_operand_order(argv, state.next_index + 1)
                # leave next_index on the first operand, if there is one
                if state.next_index + 1 < len(argv):
                    state.next_index += 1
                state.terminated = True
                log_debug(f"Option scanning terminated at index {state.next_index}")
                return END_OF_OPTIONS, NO_LONG_INDEX

            if is_option(current):
                return self._scan_option(argv, current, mode, short_table, longopts)

            if self.posixly_correct or mode == MODE_STOP_AT_NON_OPTION:
                return END_OF_OPTIONS, NO_LONG_INDEX

            if mode == MODE_RETURN_IN_ORDER:
                state.next_index += 1
                state.argument = current
                return NON_OPTION, NO_LONG_INDEX

            unscanned = argv[state.next_index + 1 : self._operand_tail(argv)]
            if not any(is_option(arg) for arg in unscanned):
                break

            del argv[state.next_index]
            argv.append(current)
            state.permuted += 1
            log_debug(f"Permuted operand {current!r} to the end of argv")

        self._restore_operand_order(argv, state.next_index)
        return END_OF_OPTIONS, NO_LONG_INDEX

    def iter_options(
        self,
        argv: MutableSequence[str],
        optstring: str,
        longopts: Sequence[OptionSpec] = (),
    ) -> Iterator[ScanResult]:
        """Yield every option left in *argv* until scanning completes."""
        while True:
            token, long_index = self.scan_long(argv, optstring, longopts)
            if token == END_OF_OPTIONS:
                return
            yield ScanResult(token, self.argument, long_index, self.option_char)

    def _scan_option(
        self,
        argv: MutableSequence[str],
        current: str,
        mode: str,
        short_table: dict[str, OptionSpec],
        longopts: Sequence[OptionSpec],
    ) -> tuple[Token, int]:
        state = self._state
        is_long = is_long_option(current)
        long_index = NO_LONG_INDEX
        match: OptionSpec | None = None
        inline: str | None = None

        if is_long:
            name, sep, value = current[2:].partition("=")
            if sep:
                inline = value
            for index, spec in enumerate(longopts):
                if spec.name == name:
                    match, long_index = spec, index
                    break
            option_char: Token = match.val if match is not None else ""
        else:
            option_char = current[state.next_char + 1]
            match = short_table.get(option_char)

        state.option_char = ""
        has_arg = False
        consumed = 1

        if match is not None:
            token: Token = match.val
            has_arg = match.has_arg is not ArgFlags.NONE
            following = state.next_index + 1
            next_is_argument = following < self._operand_tail(argv) and not is_option(
                argv[following]
            )

            if has_arg and not is_long:
                remainder = current[state.next_char + 2 :]
                if remainder:
                    state.argument = remainder
                elif match.has_arg is ArgFlags.REQUIRED and next_is_argument:
                    state.argument = argv[following]
                    consumed = 2
            elif has_arg:
                if inline is not None:
                    state.argument = inline
                elif next_is_argument:
                    state.argument = argv[following]
                    consumed = 2

            if has_arg and state.argument is None:
                if match.has_arg is ArgFlags.REQUIRED:
                    self._report(
                        argv, mode, f"option '{match.name}' requires an argument"
                    )
                    token = MISSING_ARGUMENT if mode == MODE_SILENT else UNRECOGNIZED
                    state.option_char = match.val
                else:
                    has_arg = False
        else:
            name = option_char if option_char else current
            self._report(argv, mode, f"unrecognised option '{name}'")
            token = UNRECOGNIZED
            state.option_char = option_char

        if not is_long and not has_arg and state.next_char < len(current) - 2:
            state.next_char += 1
        else:
            state.next_index += consumed if has_arg else 1
            state.next_char = 0

        return token, long_index

    def _operand_tail(self, argv: Sequence[str]) -> int:
        """Index where the operands moved to the end of argv begin."""
        return len(argv) - self._state.permuted

    def _restore_operand_order(self, argv: MutableSequence[str], start: int) -> None:
        """Put the moved operands back in front of the unscanned ones after *start*.

        Operands are moved to the end one at a time as they are skipped, so the
        ones still sitting between *start* and the tail come later in the
        original command line and must follow them.
        """
        tail = self._operand_tail(argv)
        if self._state.permuted and tail > start:
            argv[start:] = [*argv[tail:], *argv[start:tail]]
        self._state.permuted = 0

    def _report(self, argv: Sequence[str], mode: str, message: str) -> None:
        prog = program_name(argv[0] if argv else None)
        log_debug(f"{prog}: {message}")
        if not self.print_errors or mode == MODE_SILENT:
            return
        stream = self._error_stream if self._error_stream is not None else sys.stderr
        print(f"{prog}: {message}", file=stream)
