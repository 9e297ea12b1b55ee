"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from tiny_cmdline.core.models import ParseStatus

SUCCESS: int = 0
"""Clean exit — parsing completed, or help was requested."""

GENERAL_ERROR: int = 1
"""Unrecognized option, or a TinyCmdlineError was caught and displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

FOR_STATUS: dict[ParseStatus, int] = {
    ParseStatus.SUCCESS: SUCCESS,
    ParseStatus.HELP_REQUESTED: SUCCESS,
    ParseStatus.UNRECOGNIZED_OPTION: GENERAL_ERROR,
}
"""Process exit code for each terminal parse outcome."""
