"""Static command table — the only place commands are declared.

The table is built once at start-up from the constants below.  There is
no discovery step: adding a command means adding an entry here.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from devenv_wrap.core.models import BackendInvocation, CommandDefinition


BACKEND_EXECUTABLE: str = "docker"
"""Container-orchestration backend resolved on ``PATH``."""

COMPOSE_FILE: str = "tools/docker-compose.yaml"
"""Compose file path, relative to the backend's working directory."""


class CommandTable:
    """Immutable mapping from command name to :class:`CommandDefinition`.

    Raises
    ------
    ValueError
        If two definitions share the same name.
    """

    def __init__(self, definitions: Iterable[CommandDefinition]) -> None:
        entries: dict[str, CommandDefinition] = {}
        for definition in definitions:
            if definition.name in entries:
                raise ValueError(f"Duplicate command name: {definition.name!r}")
            entries[definition.name] = definition
        self._entries: Mapping[str, CommandDefinition] = MappingProxyType(entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> CommandDefinition | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        """Return all command names, sorted."""
        return sorted(self._entries)

    def list_commands(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, description)`` pairs in lexicographic name order.

        A fresh generator is produced on every call, so the listing can be
        restarted at will.
        """
        for name in sorted(self._entries):
            yield name, self._entries[name].description


def build_command_table(
    *,
    executable: str = BACKEND_EXECUTABLE,
    compose_file: str = COMPOSE_FILE,
    cwd: Path | None = None,
) -> CommandTable:
    """Build the default command table.

    Parameters
    ----------
    executable:
        Backend executable name or path.
    compose_file:
        Compose file passed to ``-f``.
    cwd:
        Working directory for backend invocations (``-C``).
    """
    base = ("compose", "-f", compose_file)
    return CommandTable(
        (
            CommandDefinition(
                name="help",
                description="Show this help",
            ),
            CommandDefinition(
                name="doctor",
                description="Check local environment prerequisites",
            ),
            CommandDefinition(
                name="setup",
                description="Setup environment for local development",
                invocation=BackendInvocation(
                    executable=executable,
                    args=(*base, "up", "-d", "--remove-orphans"),
                    cwd=cwd,
                ),
            ),
            CommandDefinition(
                name="destroy",
                description="Destroy environment for local development",
                invocation=BackendInvocation(
                    executable=executable,
                    args=(*base, "down", "-v", "-t", "0", "--remove-orphans"),
                    cwd=cwd,
                ),
            ),
        )
    )
