"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``, ``help``) remain functional even when Rich is
not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from devenv_wrap.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


# Same tag shape and backslash escaping as ``rich.markup``.
_MARKUP_TAG = re.compile(r"(\\*)(\[[a-z#/@][^\[]*?\])")


def _render_tag_plain(match: re.Match[str]) -> str:
    backslashes, escaped = divmod(len(match.group(1)), 2)
    return "\\" * backslashes + (match.group(2) if escaped else "")


def strip_markup(text: str) -> str:
    """Remove Rich style tags such as ``[bold red]`` from *text*.

    Escaped tags (``\\[red]``) are kept as literal text, as Rich does.
    """
    return _MARKUP_TAG.sub(_render_tag_plain, text)


def _escape_plain(text: str) -> str:
    return _MARKUP_TAG.sub(lambda m: f"{m.group(1)}{m.group(1)}\\{m.group(2)}", text)


def escape_markup(text: str) -> str:
    """Escape user-supplied *text* so brackets are printed literally.

    Without Rich the escaped form is undone by :func:`strip_markup`.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return _escape_plain(text)
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*(strip_markup(o) if isinstance(o, str) else o for o in objects), file=stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Messages, errors and diagnostics."""

stdout_console = _ConsoleProxy(stderr=False)
"""Command output such as the help listing."""
