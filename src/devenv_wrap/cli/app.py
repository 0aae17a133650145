"""CLI application entry point and command routing for devenv-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~devenv_wrap.exceptions.DevenvWrapError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No command resolution lives here; it is delegated to
  :class:`~devenv_wrap.core.runner.EnvironmentRunner`.
* This module is the only place that translates between the domain world
  and the OS process exit code.  A failing backend's own status is passed
  through unchanged.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from devenv_wrap.cli import exit_codes
from devenv_wrap.cli.console import console, escape_markup
from devenv_wrap.exceptions import (
    BackendFailedError,
    BackendUnavailableError,
    DevenvWrapError,
    UnknownCommandError,
)
from devenv_wrap.utils.log import configure_logging
from devenv_wrap.version import __version__

if TYPE_CHECKING:
    from devenv_wrap.core.command_table import CommandTable
    from devenv_wrap.core.runner import EnvironmentRunner

DEFAULT_COMMAND = "help"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Command names are not declared as argparse choices: an unknown name
    must reach the runner so that it is reported with the names from the
    command table.
    """
    parser = argparse.ArgumentParser(
        prog="devenv-wrap",
        description="Bring the local development environment up and down.",
        epilog="Run 'devenv-wrap help' to list the available commands.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the resolved backend command line.",
    )
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=None,
        metavar="DIR",
        help="Run the backend from DIR instead of the current directory.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=DEFAULT_COMMAND,
        help="Command to run (default: %(default)s).",
    )
    parser.add_argument(
        "extra_args",
        nargs="*",
        default=[],
        help="Extra arguments appended to the backend call. Put '--' before options.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_runner(table: CommandTable, directory: Path | None) -> EnvironmentRunner:
    """Instantiate the launcher and built-ins around *table*."""
    from devenv_wrap.cli.doctor import run_doctor
    from devenv_wrap.cli.help_view import render_help
    from devenv_wrap.core.runner import EnvironmentRunner
    from devenv_wrap.infra.subprocess_launcher import SubprocessLauncher

    return EnvironmentRunner(
        table,
        SubprocessLauncher(),
        builtins={
            "help": lambda: render_help(table.list_commands()),
            "doctor": lambda: run_doctor(directory),
        },
    )


def _handle_command(command: str, extra_args: Sequence[str], directory: Path | None) -> int:
    """Run *command* and raise :class:`BackendFailedError` on a non-zero backend exit."""
    from devenv_wrap.core.command_table import build_command_table

    table = build_command_table(cwd=directory)
    runner = _build_runner(table, directory)
    returncode = runner.run(command, extra_args)

    definition = table.get(command)
    if returncode != exit_codes.SUCCESS and definition is not None and not definition.is_builtin:
        raise BackendFailedError(command, returncode)
    return returncode


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the devenv-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DevenvWrapError
        Rendered and mapped to an exit code by :func:`cli`.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    return _handle_command(args.command, args.extra_args, args.directory)


def exit_code_for(exc: DevenvWrapError) -> int:
    """Map a domain error to the process exit code."""
    if isinstance(exc, BackendFailedError):
        return exc.returncode
    if isinstance(exc, UnknownCommandError):
        return exit_codes.UNKNOWN_COMMAND
    if isinstance(exc, BackendUnavailableError):
        return exit_codes.BACKEND_UNAVAILABLE
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except DevenvWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
