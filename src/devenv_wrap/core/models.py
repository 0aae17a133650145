"""Domain models for devenv-wrap.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Backend invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BackendInvocation:
    """A fixed call of the backend executable."""

    executable: str
    """Executable name or path (e.g. ``docker``)."""

    args: tuple[str, ...]
    """Predefined arguments, in order."""

    cwd: Path | None = None
    """Working directory for the child, or ``None`` for the current one."""

    def argv(self, extra_args: Sequence[str] = ()) -> list[str]:
        """Return the full argv: executable, predefined args, then *extra_args*."""
        return [self.executable, *self.args, *extra_args]


# ---------------------------------------------------------------------------
# Command definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """One entry of the command table."""

    name: str
    """Command name typed by the user (e.g. ``setup``)."""

    description: str
    """One-line description rendered by ``help``."""

    invocation: BackendInvocation | None = None
    """Backend call, or ``None`` for a built-in handled in-process."""

    @property
    def is_builtin(self) -> bool:
        return self.invocation is None
