"""Allow ``python -m devenv_wrap`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m devenv_wrap`` behaves identically to the ``devenv-wrap``
console script.
"""

from __future__ import annotations

from devenv_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
