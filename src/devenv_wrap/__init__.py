"""devenv-wrap — local development environment lifecycle CLI.

Wraps ``docker compose`` behind a small, statically declared command
table with a strict layered architecture.
"""

from devenv_wrap.version import __version__

__all__: list[str] = ["__version__"]
