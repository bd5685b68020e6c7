"""Custom exception hierarchy for bundle-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`BundleWrapError`.  Raw ``OSError`` instances raised by the
filesystem or by process spawning must NEVER propagate beyond the
infrastructure layer — they are caught there and re-raised as a typed
subclass defined here.

Hierarchy
---------
BundleWrapError
├── InvocationError
├── ManifestLookupError
│   ├── ManifestNotFoundError
│   └── ManifestRootReachedError
└── SpawnFailedError
"""

from __future__ import annotations


class BundleWrapError(Exception):
    """Base exception for all bundle-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class InvocationError(BundleWrapError):
    """Raised when the name the binary was launched as cannot be determined."""


# --- Manifest lookup -------------------------------------------------------

class ManifestLookupError(BundleWrapError):
    """Raised when no manifest-bearing directory could be located.

    The dispatch engine treats both subclasses the same way (run the
    command directly); they stay distinct for diagnostics and tests.
    """


class ManifestNotFoundError(ManifestLookupError):
    """Raised when a directory on the way up cannot be read."""


class ManifestRootReachedError(ManifestLookupError):
    """Raised when the filesystem root is reached without a manifest."""


# --- Process execution -----------------------------------------------------

class SpawnFailedError(BundleWrapError):
    """Raised when an executable cannot be started (missing, not executable)."""

    def __init__(
        self,
        message: str,
        *,
        executable: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.executable: str = executable
        """Name of the executable that failed to start."""
