"""Core layer — command resolution and dispatch decisions.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or process I/O; both arrive through protocols.
* No imports from ``cli`` or ``infra``.
"""

from bundle_wrap.core.dispatch import DispatchEngine, next_state
from bundle_wrap.core.models import (
    DispatchOutcome,
    DispatchState,
    ExecutionPath,
    InvocationContext,
    ResolvedCommand,
)
from bundle_wrap.core.protocols import Diagnostics, ManifestLocator, ProcessRunner
from bundle_wrap.core.resolver import resolve, resolve_context

__all__: list[str] = [
    "Diagnostics",
    "DispatchEngine",
    "DispatchOutcome",
    "DispatchState",
    "ExecutionPath",
    "InvocationContext",
    "ManifestLocator",
    "ProcessRunner",
    "ResolvedCommand",
    "next_state",
    "resolve",
    "resolve_context",
]
