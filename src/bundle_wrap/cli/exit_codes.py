"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.

The status of the dispatched command is never one of these: once a
command has been dispatched, ``bw`` exits with :data:`SUCCESS` whatever
the child returned.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: help printed or command dispatched."""

GENERAL_ERROR: int = 1
"""A known BundleWrapError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
