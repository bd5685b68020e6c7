"""Domain models for bundle-wrap.

All models are **frozen** dataclasses or enums — immutable values scoped
to a single invocation.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationContext:
    """How the process was launched."""

    invoked_name: str
    """File name the binary was launched as (``bw``, ``rspecw``, …)."""

    raw_args: tuple[str, ...]
    """Full argument vector, program name included."""

    @classmethod
    def from_argv(
        cls,
        argv: Sequence[str],
        *,
        invoked_name: str | None = None,
    ) -> InvocationContext:
        """Build a context from ``sys.argv``-style data.

        The invoked name defaults to the last path component of
        ``argv[0]``; an empty *argv* yields an empty name.
        """
        if invoked_name is None:
            invoked_name = PurePath(argv[0]).name if argv else ""
        return cls(invoked_name=invoked_name, raw_args=tuple(argv))


@dataclass(frozen=True, slots=True)
class ResolvedCommand:
    """Effective command and the arguments to hand it."""

    command: str
    arguments: tuple[str, ...]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class ExecutionPath(enum.Enum):
    """Which way a command was launched."""

    WRAPPED = "wrapped"
    """Through the wrapper tool (``bundle exec <command>``)."""

    DIRECT = "direct"
    """As the system-wide executable."""


class DispatchState(enum.Enum):
    """States of the wrapped-then-direct fallback machine."""

    WRAPPED_ATTEMPT = "wrapped_attempt"
    DIRECT_FALLBACK = "direct_fallback"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Result of a dispatch: the last path taken and its exit status."""

    exit_status: int | None
    """Exit status of the last child, or ``None`` if it could not start."""

    path: ExecutionPath

    project_dir: Path | None = None
    """Directory holding the manifest, when one was found."""

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0
