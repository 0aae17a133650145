"""``devenv-wrap doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the machine can run the local development environment.

This module lives in the CLI layer: it may import from ``infra``
and ``core``, and it renders via Rich.  It purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from devenv_wrap.cli import exit_codes
from devenv_wrap.cli.console import console
from devenv_wrap.core.command_table import BACKEND_EXECUTABLE, COMPOSE_FILE
from devenv_wrap.infra.backend_detector import BackendStatus, detect_backend
from devenv_wrap.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _backend_check(backend: BackendStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the backend executable row."""
    if backend.found:
        path_str = str(backend.path) if backend.path else "found"
        return backend.executable, path_str, "[green]OK[/green]"
    return backend.executable, "not found", "[red]FAIL[/red]"


def _compose_file_check(directory: Path | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the compose file row."""
    base = directory if directory is not None else Path.cwd()
    compose_path = base / COMPOSE_FILE
    if compose_path.is_file():
        return "compose file", str(compose_path), "[green]OK[/green]"
    return "compose file", f"{compose_path} missing", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _devenv_wrap_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the devenv-wrap version row."""
    return "devenv-wrap", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ndevenv-wrap doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(directory: Path | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Parameters
    ----------
    directory:
        Working directory the backend would run in (``-C``); defaults to
        the current directory.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    backend_status = detect_backend()
    checks = [
        _devenv_wrap_version_check(),
        _python_version_check(),
        _backend_check(backend_status),
        _compose_file_check(directory),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="devenv-wrap doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if not backend_status.found and backend_status.install_commands:
        console.print(f"[yellow]{BACKEND_EXECUTABLE} is not installed.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in backend_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
