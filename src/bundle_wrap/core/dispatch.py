"""Core dispatch engine — wrapped execution with a timed direct fallback.

When a manifest is found above the working directory the command runs
through the wrapper tool (``bundle exec <command> <args...>``).  A wrapped
run that cannot start, or that fails faster than the grace period, is
retried once as a direct run of ``<command> <args[1:]>``.  Slow failures
are taken as genuine and never retried, so expensive commands do not run
twice.  Without a manifest the command runs directly with all of its
arguments and there is nothing to fall back to.

Note the argument asymmetry: the fallback drops the first argument while
the no-manifest path keeps them all.  Both are deliberate and covered by
tests.

Guarantees
----------
* At most two child processes, strictly one after the other.
* :meth:`DispatchEngine.dispatch` never raises for lookup or spawn
  failures; they end up in the returned :class:`DispatchOutcome`.
* No ``print()``; all output goes through the injected diagnostics.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from pathlib import Path

from bundle_wrap.config import RuntimeConfig
from bundle_wrap.core.models import DispatchOutcome, DispatchState, ExecutionPath
from bundle_wrap.core.protocols import Diagnostics, ManifestLocator, ProcessRunner
from bundle_wrap.exceptions import ManifestLookupError, SpawnFailedError


def next_state(exit_status: int, elapsed: float, grace_period: float) -> DispatchState:
    """Decide what follows a wrapped run that completed with *exit_status*.

    Success ends the dispatch.  A failure strictly faster than
    *grace_period* seconds moves to the direct fallback; anything slower
    ends the dispatch with the failing status.
    """
    if exit_status == 0:
        return DispatchState.DONE
    if elapsed < grace_period:
        return DispatchState.DIRECT_FALLBACK
    return DispatchState.DONE


class DispatchEngine:
    """Runs a resolved command, wrapped or direct.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    locator:
        Upward manifest search, see :class:`ManifestLocator`.
    diagnostics:
        Sink for debug and fatal messages.
    config:
        Runtime settings (manifest name, wrapper tool, grace period).
    clock:
        Monotonic time source in seconds.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        locator: ManifestLocator,
        diagnostics: Diagnostics,
        *,
        config: RuntimeConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._runner: ProcessRunner = runner
        self._locator: ManifestLocator = locator
        self._diagnostics: Diagnostics = diagnostics
        self._config: RuntimeConfig = config if config is not None else RuntimeConfig()
        self._clock: Callable[[], float] = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(
        self,
        command: str,
        arguments: Sequence[str],
        cwd: Path,
    ) -> DispatchOutcome:
        """Run *command* from *cwd* and report the last execution path taken."""
        manifest = self._config.manifest_name
        try:
            project_dir = self._locator(cwd, manifest)
        except ManifestLookupError as exc:
            self._diagnostics.debug(
                f"No {manifest} found ({exc}), executing global command"
            )
            return DispatchOutcome(
                exit_status=self._run_direct(command, arguments),
                path=ExecutionPath.DIRECT,
            )

        self._diagnostics.debug(
            f"Will execute {command} from {manifest} found at {project_dir}"
        )
        return self._run_wrapped(command, tuple(arguments), project_dir)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_wrapped(
        self,
        command: str,
        arguments: tuple[str, ...],
        project_dir: Path,
    ) -> DispatchOutcome:
        fallback_args = arguments[1:]
        state = DispatchState.WRAPPED_ATTEMPT
        path = ExecutionPath.WRAPPED
        exit_status: int | None = None

        while state is not DispatchState.DONE:
            if state is DispatchState.WRAPPED_ATTEMPT:
                state, exit_status = self._attempt_wrapped(command, arguments)
            else:
                self._diagnostics.debug(f"Falling back to global {command}")
                exit_status = self._run_direct(command, fallback_args)
                path = ExecutionPath.DIRECT
                state = DispatchState.DONE

        return DispatchOutcome(
            exit_status=exit_status,
            path=path,
            project_dir=project_dir,
        )

    def _attempt_wrapped(
        self,
        command: str,
        arguments: tuple[str, ...],
    ) -> tuple[DispatchState, int | None]:
        wrapper = self._config.wrapper_executable
        started = self._clock()
        try:
            exit_status = self._runner.run(
                wrapper,
                [self._config.wrapper_subcommand, command, *arguments],
            )
        except SpawnFailedError as exc:
            self._diagnostics.fatal(
                f"Unable to find {wrapper} in PATH, {exc.__cause__ or exc}"
            )
            return DispatchState.DIRECT_FALLBACK, None
        elapsed = self._clock() - started

        self._diagnostics.debug(f"Status : {exit_status} after {elapsed:.2f}s")
        return next_state(exit_status, elapsed, self._config.grace_period), exit_status

    def _run_direct(self, command: str, arguments: Sequence[str]) -> int | None:
        try:
            return self._runner.run(command, list(arguments))
        except SpawnFailedError as exc:
            # Final outcome; nothing left to fall back to.
            self._diagnostics.fatal(str(exc))
            return None
