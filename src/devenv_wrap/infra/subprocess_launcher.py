"""``subprocess`` backed implementation of :class:`~devenv_wrap.core.protocols.ProcessLauncher`.

This module is the **only** place in the codebase that spawns the
backend.  Spawn failures are caught here and re-raised as
:class:`~devenv_wrap.exceptions.BackendUnavailableError`.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from collections.abc import Sequence

from devenv_wrap.core.models import BackendInvocation
from devenv_wrap.exceptions import BackendUnavailableError
from devenv_wrap.infra.backend_detector import install_hint
from devenv_wrap.utils.log import get_logger

logger = get_logger(__name__)

_SIGNAL_EXIT_BASE = 128


def normalize_returncode(returncode: int) -> int:
    """Map a ``Popen`` return code to a shell-style exit status.

    ``Popen`` reports death by signal *N* as ``-N``; shells report it as
    ``128 + N``.
    """
    if returncode < 0:
        return _SIGNAL_EXIT_BASE - returncode
    return returncode


def interrupt_reached_child(pid: int) -> bool:
    """Return ``True`` when a terminal Ctrl+C was already delivered to *pid*.

    A terminal sends SIGINT to its whole foreground process group, and a
    Windows console sends Ctrl+C to every attached process.  Forwarding
    again would deliver the signal twice.
    """
    if os.name == "nt":
        return True
    try:
        foreground = os.tcgetpgrp(sys.stdin.fileno())
        return os.getpgid(pid) == foreground
    except (AttributeError, OSError, ValueError):
        # No controlling terminal, or the child is already gone.
        return False


class SubprocessLauncher:
    """Concrete :class:`ProcessLauncher` backed by :class:`subprocess.Popen`.

    The child inherits stdin, stdout and stderr, so its output reaches
    the terminal as it is produced.
    """

    def launch(
        self,
        invocation: BackendInvocation,
        extra_args: Sequence[str] = (),
    ) -> int:
        """Run *invocation* to completion and return its exit status.

        Raises
        ------
        BackendUnavailableError
            When the executable is missing or cannot be spawned.
        KeyboardInterrupt
            Re-raised once the child has exited.  SIGINT is forwarded
            unless the terminal already delivered it; a second interrupt
            kills the child.
        """
        argv = invocation.argv(extra_args)

        try:
            process = subprocess.Popen(argv, cwd=invocation.cwd)
        except FileNotFoundError as exc:
            if invocation.cwd is not None and not invocation.cwd.is_dir():
                raise BackendUnavailableError(
                    f"Working directory does not exist: {invocation.cwd}",
                ) from exc
            raise BackendUnavailableError(
                f"{invocation.executable} is not installed or not on PATH.",
                hint=install_hint(),
            ) from exc
        except PermissionError as exc:
            raise BackendUnavailableError(
                f"Permission denied when starting {invocation.executable}.",
                hint="Check that the executable and working directory are accessible.",
            ) from exc
        except OSError as exc:
            raise BackendUnavailableError(
                f"Could not start {invocation.executable}: {exc}",
            ) from exc

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            if not interrupt_reached_child(process.pid):
                logger.debug("Forwarding SIGINT to pid %d", process.pid)
                process.send_signal(signal.SIGINT)
            try:
                process.wait()
            except KeyboardInterrupt:
                logger.debug("Interrupted again, killing pid %d", process.pid)
                process.kill()
                process.wait()
            raise

        return normalize_returncode(returncode)
