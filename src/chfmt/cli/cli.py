#!/usr/bin/env python3
"""
chfmt.cli.cli

Typer-based CLI that converts every image of one format below the current
working directory into another format.

Examples
--------
Convert JPEG files to PNG (the defaults):

    chfmt

Convert PNG files to GIF:

    chfmt --src png --dst gif
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

import click
import typer

from chfmt import VERSION
from chfmt.errors import ChfmtError, ExitCode, TooManyArgumentsError, WorkingDirectoryError

MAX_POSITIONAL_ARGS = 2

app = typer.Typer(
    name="chfmt",
    help="Convert image files below the current directory to another format.",
    add_completion=False,
)


# -----------------------------
# Utilities
# -----------------------------
def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-facing error line.

    Parameters
    ----------
    exc : Exception
        Exception raised while running the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"Error: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return int(code)
    return int(ExitCode.FAILED_TO_EXEC)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _current_directory() -> Path:
    """Resolve the working directory the conversion is rooted at."""
    try:
        return Path.cwd()
    except OSError as exc:
        raise WorkingDirectoryError(
            f"Failed to get current directory: {exc.strerror}"
        ) from exc


# -----------------------------
# Command
# -----------------------------
@app.command()
def chfmt_cmd(
    args: list[str] | None = typer.Argument(None, hidden=True),
    version: bool = typer.Option(False, "--version", help="Print version information."),
    src: str = typer.Option(
        "jpeg",
        "--src",
        help="Format of source image file(s): jpeg, png or gif.",
    ),
    dst: str = typer.Option(
        "png",
        "--dst",
        help="Format of destination image file(s): jpeg, png or gif.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert SRC images below the current directory into DST images.

    Outputs are written next to their sources with the extension replaced.
    Existing files with the same name are overwritten.
    """
    if args and len(args) > MAX_POSITIONAL_ARGS:
        raise typer.Exit(
            code=_print_error(TooManyArgumentsError("Too many arguments"), debug)
        )

    if version:
        typer.echo(f"chfmt version {VERSION}")
        return

    _configure_logging(debug)
    typer.echo("Change formats...")

    try:
        from chfmt.api import change_format

        root = _current_directory()
        change_format(root, src=src, dst=dst)
    except ChfmtError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))


def run(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit code instead of exiting.

    Flag parsing errors map to ``ExitCode.PARSE_FLAG_ERROR`` rather than
    Click's default usage exit status.
    """
    command = typer.main.get_command(app)
    try:
        rv = command.main(
            args=list(argv) if argv is not None else None,
            prog_name="chfmt",
            standalone_mode=False,
        )
    except click.UsageError as exc:
        exc.show()
        return int(ExitCode.PARSE_FLAG_ERROR)
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return int(ExitCode.FAILED_TO_EXEC)
    return rv if isinstance(rv, int) else int(ExitCode.OK)


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
