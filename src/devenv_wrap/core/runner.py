"""Environment lifecycle runner — resolves a command name and runs it.

The runner holds no state beyond its collaborators: a
:class:`~devenv_wrap.core.command_table.CommandTable`, a
:class:`~devenv_wrap.core.protocols.ProcessLauncher`, and the in-process
handlers for built-in commands.

Guarantees
----------
* Unknown names never reach the launcher.
* The backend's exit code is returned unchanged; nothing is retried.
* No ``print()``; rendering belongs to the CLI layer.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Iterator, Mapping, Sequence

from devenv_wrap.core.command_table import CommandTable
from devenv_wrap.core.protocols import ProcessLauncher
from devenv_wrap.exceptions import UnknownCommandError
from devenv_wrap.utils.log import get_logger

logger = get_logger(__name__)

BuiltinHandler = Callable[[], int]


class EnvironmentRunner:
    """Translate a command name into exactly one backend invocation.

    Parameters
    ----------
    table:
        The static command table.
    launcher:
        Any object satisfying the :class:`ProcessLauncher` protocol.
    builtins:
        Handlers for table entries without a backend invocation, keyed by
        command name.
    """

    def __init__(
        self,
        table: CommandTable,
        launcher: ProcessLauncher,
        builtins: Mapping[str, BuiltinHandler] | None = None,
    ) -> None:
        self._table: CommandTable = table
        self._launcher: ProcessLauncher = launcher
        self._builtins: dict[str, BuiltinHandler] = dict(builtins or {})

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, command_name: str, extra_args: Sequence[str] = ()) -> int:
        """Run *command_name* and return its exit code.

        Raises
        ------
        UnknownCommandError
            If *command_name* is not in the table, or is a built-in with
            no registered handler.
        BackendUnavailableError
            If the backend executable cannot be spawned.
        """
        definition = self._table.get(command_name)
        if definition is None:
            raise UnknownCommandError(command_name, self._table.names())

        if definition.invocation is None:
            handler = self._builtins.get(command_name)
            if handler is None:
                raise UnknownCommandError(command_name, self._table.names())
            if extra_args:
                logger.debug("Ignoring extra arguments for %s: %s", command_name, list(extra_args))
            return handler()

        invocation = definition.invocation
        logger.debug(
            "Running %s: %s (cwd=%s)",
            command_name,
            shlex.join(invocation.argv(extra_args)),
            invocation.cwd or ".",
        )
        returncode = self._launcher.launch(invocation, extra_args)
        logger.debug("%s exited with status %d", command_name, returncode)
        return returncode

    def list_commands(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, description)`` pairs sorted by name."""
        return self._table.list_commands()
