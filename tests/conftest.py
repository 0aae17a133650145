"""Shared pytest fixtures and configuration for the devenv-wrap test suite.

Guidelines
----------
* No real backend is ever spawned: ``subprocess.Popen`` is mocked at the
  infra boundary.
* Core tests use an in-memory launcher.
* Tests must not depend on whether docker is installed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from unittest.mock import MagicMock, patch

import pytest

from devenv_wrap.core.models import BackendInvocation


class RecordingLauncher:
    """In-memory :class:`ProcessLauncher` that records every call."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def launch(
        self,
        invocation: BackendInvocation,
        extra_args: Sequence[str] = (),
    ) -> int:
        self.calls.append(invocation.argv(extra_args))
        return self.returncode


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def popen() -> Iterator[MagicMock]:
    """Patch ``subprocess.Popen`` in the launcher; the fake child exits 0.

    The fake child never shares the test runner's terminal, so a
    ``KeyboardInterrupt`` is always forwarded to it.
    """
    with patch("devenv_wrap.infra.subprocess_launcher.subprocess.Popen") as mock_popen, patch(
        "devenv_wrap.infra.subprocess_launcher.interrupt_reached_child",
        return_value=False,
    ):
        mock_popen.return_value.wait.return_value = 0
        mock_popen.return_value.pid = 4242
        yield mock_popen


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers added by ``configure_logging`` so each test starts clean."""
    yield
    logger = logging.getLogger("devenv_wrap")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
