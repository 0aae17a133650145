"""Custom exception hierarchy for devenv-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`DevenvWrapError`.  Raw ``OSError`` instances raised while spawning
the backend must NEVER propagate beyond the infrastructure layer; they
are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DevenvWrapError
├── UnknownCommandError
├── BackendUnavailableError
├── BackendFailedError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class DevenvWrapError(Exception):
    """Base exception for all devenv-wrap errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command resolution ----------------------------------------------------

class UnknownCommandError(DevenvWrapError):
    """Raised when a command name is not present in the command table."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name: str = name
        self.available: tuple[str, ...] = tuple(available)
        super().__init__(
            f"Unknown command: {name!r}",
            hint=f"Available commands: {', '.join(self.available)}",
        )


# --- Backend ---------------------------------------------------------------

class BackendUnavailableError(DevenvWrapError):
    """Raised when the backend executable cannot be located or spawned."""


class BackendFailedError(DevenvWrapError):
    """Raised when the backend ran but exited with a non-zero status.

    The CLI boundary exits with :attr:`returncode` unchanged.
    """

    def __init__(self, command: str, returncode: int) -> None:
        self.command: str = command
        self.returncode: int = returncode
        super().__init__(f"'{command}' failed: backend exited with status {returncode}.")


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DevenvWrapError):
    """Raised when an optional runtime dependency is not available."""
