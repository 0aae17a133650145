"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system and the
container-orchestration backend.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~devenv_wrap.exceptions.DevenvWrapError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from devenv_wrap.infra.backend_detector import BackendStatus, detect_backend
from devenv_wrap.infra.subprocess_launcher import SubprocessLauncher

__all__: list[str] = [
    "BackendStatus",
    "SubprocessLauncher",
    "detect_backend",
]
