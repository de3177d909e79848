"""CLI entry point for optscan."""

from pathlib import Path
from typing import Annotated

import typer

from ._constants import PROG_NAME, __version__
from .commands import cmd_scan, cmd_usage, cmd_validate_options
from .helpers import debug_print

app = typer.Typer(
    name=PROG_NAME,
    help="optscan: glibc-compatible command-line option scanning",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    rich_markup_mode=None,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    optscan: glibc-compatible command-line option scanning

    Parse command lines the way getopt_long(3) does.
    """
    pass


@app.command("scan")
def scan_command(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            help="Arguments to scan (put them after --)",
            show_default=False,
        ),
    ] = None,
    optstring: Annotated[
        str,
        typer.Option("--options", "-o", help="Short options to recognise"),
    ] = "",
    longoptions: Annotated[
        str | None,
        typer.Option(
            "--longoptions",
            "-l",
            help="Long options to recognise (comma separated, ':' for arguments)",
            metavar="LONGOPTS",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Program name used in error messages"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Do not report rejected options"),
    ] = False,
    posix: Annotated[
        bool,
        typer.Option("--posix", help="Stop scanning at the first non-option"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Emit the scan result as JSON"),
    ] = False,
) -> None:
    """Normalise a command line the way getopt(1) does."""

    debug_print(
        f"scan: optstring={optstring!r} longoptions={longoptions!r} args={args}"
    )
    exit_code, payload, diagnostics = cmd_scan(
        list(args or ()),
        optstring=optstring,
        longoptions=longoptions,
        name=name,
        quiet=quiet,
        posix=posix,
        json_output=json_output,
    )
    if diagnostics:
        typer.echo(diagnostics, err=True)
    if payload:
        typer.echo(payload)
    raise typer.Exit(code=exit_code)


@app.command("usage")
def usage_command(
    file: Annotated[
        Path,
        typer.Argument(
            help="Path to the option list JSON file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    group: Annotated[
        list[str] | None,
        typer.Option("--group", "-g", help="Group to print (repeatable)"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", min=1, help="Width of the option column"),
    ] = None,
) -> None:
    """Print the usage block described by an option list."""

    exit_code, payload = cmd_usage(file, groups=list(group or ()), width=width)
    if payload:
        typer.echo(payload, err=exit_code != 0)
    raise typer.Exit(code=exit_code)


@app.command("validate-options")
def validate_options(
    file: Annotated[
        Path,
        typer.Argument(
            help="Path to the option list JSON file to validate",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
) -> None:
    """Validate an option list JSON file."""
    cmd_validate_options(file)


if __name__ == "__main__":
    app()
