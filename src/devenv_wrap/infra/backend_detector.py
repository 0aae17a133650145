"""Infrastructure: backend detection and platform guidance.

This module is responsible for locating the container-orchestration
backend on the system PATH and providing platform-specific installation
guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from devenv_wrap.core.command_table import BACKEND_EXECUTABLE


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BackendStatus:
    """Result of a backend detection probe.

    Attributes
    ----------
    executable : str
        Name that was looked up.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty when
        the backend is already present.
    """

    executable: str
    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_backend(executable: str = BACKEND_EXECUTABLE) -> BackendStatus:
    """Probe the system for *executable*.

    Returns a :class:`BackendStatus` regardless of whether the backend is
    present; the caller decides whether to abort or merely warn.
    """
    result = shutil.which(executable)

    if result is not None:
        resolved = Path(result).resolve()
        return BackendStatus(
            executable=executable,
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return BackendStatus(
        executable=executable,
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def install_hint(install_commands: tuple[str, ...] | None = None) -> str | None:
    """Render install commands as a multi-line hint, or ``None``."""
    if install_commands is None:
        install_commands = _platform_install_commands()
    if not install_commands:
        return None
    lines = ["Install Docker with Compose using one of:"]
    lines.extend(f"  {cmd}" for cmd in install_commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Docker.DockerDesktop",
            "choco install docker-desktop",
        )
    if system == "linux":
        return (
            "sudo apt install docker.io docker-compose-v2",
            "sudo dnf install docker-ce docker-compose-plugin",
            "sudo pacman -S docker docker-compose",
        )
    if system == "darwin":
        return ("brew install --cask docker",)
    return ("Please install Docker from https://docs.docker.com/get-docker/",)
