"""Command resolution from the invocation name and argument vector.

Two invocation styles are supported:

* nominal, ``bw <command> [args...]``: the first argument is the command;
* aliased, ``<command><char> [args...]``: the binary was symlinked under
  another name and that name, minus its last character, is the command
  (``rspecw`` runs ``rspec``).  The trailing character is dropped
  unconditionally; nothing checks that it is a ``w``.
"""

from __future__ import annotations

from collections.abc import Sequence

from bundle_wrap.config import NOMINAL_BINARY_NAME
from bundle_wrap.core.models import InvocationContext, ResolvedCommand
from bundle_wrap.core.protocols import Diagnostics
from bundle_wrap.exceptions import InvocationError


def resolve(
    invoked_name: str,
    raw_args: Sequence[str],
    *,
    diagnostics: Diagnostics | None = None,
) -> ResolvedCommand | None:
    """Derive the command to run and its arguments.

    Parameters
    ----------
    invoked_name:
        File name the binary was launched as.
    raw_args:
        Full argument vector, program name at index 0.
    diagnostics:
        Optional sink for debug traces.

    Returns
    -------
    ResolvedCommand | None
        ``None`` for a nominal invocation without a command; the caller
        prints the help text and stops.

    Raises
    ------
    InvocationError
        If *invoked_name* is empty.
    """
    if not invoked_name:
        raise InvocationError(
            "Can't find binary name",
            hint=f"Run the tool as '{NOMINAL_BINARY_NAME} <command>'.",
        )
    if diagnostics is not None:
        diagnostics.debug(f"invoked_name {invoked_name}")

    if invoked_name == NOMINAL_BINARY_NAME:
        if diagnostics is not None:
            diagnostics.debug("Same command")
        if len(raw_args) < 2:
            return None
        if diagnostics is not None:
            for arg in raw_args:
                diagnostics.debug(f"Arg: {arg}")
        # [bw command args...]
        return ResolvedCommand(command=raw_args[1], arguments=tuple(raw_args[2:]))

    # [commandX args...]
    return ResolvedCommand(command=invoked_name[:-1], arguments=tuple(raw_args[1:]))


def resolve_context(
    context: InvocationContext,
    *,
    diagnostics: Diagnostics | None = None,
) -> ResolvedCommand | None:
    """Convenience wrapper around :func:`resolve` for an :class:`InvocationContext`."""
    return resolve(context.invoked_name, context.raw_args, diagnostics=diagnostics)
