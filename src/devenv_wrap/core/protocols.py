"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from devenv_wrap.core.models import BackendInvocation


class ProcessLauncher(Protocol):
    """Contract for spawning the backend process.

    Any object that implements :meth:`launch` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def launch(
        self,
        invocation: BackendInvocation,
        extra_args: Sequence[str] = (),
    ) -> int:
        """Run *invocation* to completion and return its exit code.

        The child inherits the caller's standard streams.  Implementations
        must map spawn failures to
        :class:`~devenv_wrap.exceptions.BackendUnavailableError`.

        Raises
        ------
        BackendUnavailableError
            When the executable cannot be located or spawned.
        """
        ...  # pragma: no cover
