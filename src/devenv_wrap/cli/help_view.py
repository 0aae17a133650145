"""Rendering of the ``help`` command listing."""

from __future__ import annotations

from collections.abc import Iterable

from devenv_wrap.cli import exit_codes
from devenv_wrap.cli.console import stdout_console

NAME_WIDTH = 30


def format_command_line(name: str, description: str) -> str:
    """Return one help line: cyan name padded to :data:`NAME_WIDTH`, then description."""
    return f"[cyan]{name:<{NAME_WIDTH}}[/cyan] {description}"


def render_help(commands: Iterable[tuple[str, str]]) -> int:
    """Print each ``(name, description)`` pair to stdout."""
    for name, description in commands:
        stdout_console.print(format_command_line(name, description))
    return exit_codes.SUCCESS
