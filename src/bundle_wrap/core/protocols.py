"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ProcessRunner(Protocol):
    """Contract for the OS process-execution facility.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, executable: str, args: Sequence[str]) -> int:
        """Run *executable* with *args*, block until it exits.

        Returns
        -------
        int
            The child's exit status (``0`` on success).

        Raises
        ------
        SpawnFailedError
            When the executable cannot be started at all.
        """
        ...  # pragma: no cover


class Diagnostics(Protocol):
    """Contract for diagnostic output.

    ``debug`` messages are only shown in verbose mode; ``fatal`` messages
    are always shown.
    """

    def debug(self, message: str) -> None:
        ...  # pragma: no cover

    def fatal(self, message: str) -> None:
        ...  # pragma: no cover


class ManifestLocator(Protocol):
    """Contract for the upward manifest search."""

    def __call__(self, start_dir: Path, manifest_name: str) -> Path:
        """Return the nearest directory at or above *start_dir* holding *manifest_name*.

        Raises
        ------
        ManifestNotFoundError
            When a directory on the way up cannot be read.
        ManifestRootReachedError
            When the filesystem root is reached without a match.
        """
        ...  # pragma: no cover
