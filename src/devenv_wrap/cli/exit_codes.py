"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  A
backend failure is the one exception: its own status is passed through.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known DevenvWrapError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

UNKNOWN_COMMAND: int = 64
"""The command name is not in the table.  Matches ``EX_USAGE``."""

BACKEND_UNAVAILABLE: int = 127
"""The backend executable could not be spawned.  Matches the shell's "command not found"."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
