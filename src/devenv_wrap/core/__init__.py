"""Core / service layer — command definitions and dispatch.

Rules
-----
* No ``print()`` calls.
* No process spawning or filesystem access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from devenv_wrap.core.command_table import (
    BACKEND_EXECUTABLE,
    COMPOSE_FILE,
    CommandTable,
    build_command_table,
)
from devenv_wrap.core.models import BackendInvocation, CommandDefinition
from devenv_wrap.core.protocols import ProcessLauncher
from devenv_wrap.core.runner import EnvironmentRunner

__all__: list[str] = [
    "BACKEND_EXECUTABLE",
    "BackendInvocation",
    "COMPOSE_FILE",
    "CommandDefinition",
    "CommandTable",
    "EnvironmentRunner",
    "ProcessLauncher",
    "build_command_table",
]
