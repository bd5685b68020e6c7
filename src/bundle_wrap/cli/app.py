"""CLI application entry point for bundle-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~bundle_wrap.exceptions.BundleWrapError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; resolution and dispatch decisions are
  delegated to the core layer, filesystem and processes to infra.
* There is no option parser: every argument after the command belongs to
  the command and is passed through verbatim.
* The exit status of the dispatched command is not propagated.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from bundle_wrap.cli import exit_codes
from bundle_wrap.cli.console import console, out_console
from bundle_wrap.cli.diagnostics import ConsoleDiagnostics
from bundle_wrap.config import DEBUG_ENV_VAR, NOMINAL_BINARY_NAME, RuntimeConfig
from bundle_wrap.core.dispatch import DispatchEngine
from bundle_wrap.core.models import InvocationContext
from bundle_wrap.core.resolver import resolve_context
from bundle_wrap.exceptions import BundleWrapError
from bundle_wrap.infra.manifest_locator import locate_manifest
from bundle_wrap.infra.process_runner import SubprocessRunner
from bundle_wrap.version import __version__


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------

HELP_TEXT: str = f"""\
{NOMINAL_BINARY_NAME} {__version__} - Cedric Gatay | Code-Troopers

Will execute provided command using bundler if available, looking up parent directories recursively for Gemfile

Usage:
    {NOMINAL_BINARY_NAME} <command> [args...]

If you symlink using another name, it will automatically run the associated binary:
    * `fastlanew` will run `fastlane`
    * `podw repo update` will run `pod repo update`
To prevent conflict, the convention is adding an extra-character to the command.
Here 'w' is used to remind the wrapper thing, but this is not checked extensively

Debug option:
   * if you export {DEBUG_ENV_VAR} env var, binary will output all logs"""


def print_help() -> None:
    """Print the static usage text to stdout."""
    out_console.print(HELP_TEXT, markup=False)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def _working_directory(diagnostics: ConsoleDiagnostics) -> Path:
    """Return the process working directory, or ``.`` if it is gone.

    A deleted or unreadable working directory still dispatches: ``.`` then
    fails the manifest lookup and the command runs directly.
    """
    try:
        return Path.cwd()
    except OSError as exc:
        diagnostics.debug(f"Unable to resolve working directory: {exc}")
        return Path(".")


def main(
    argv: Sequence[str] | None = None,
    *,
    invoked_name: str | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    engine: DispatchEngine | None = None,
) -> int:
    """Run the bundle-wrap CLI.

    Parameters
    ----------
    argv:
        Full argument vector, program name included.  When ``None``
        (default), ``sys.argv`` is used.
    invoked_name:
        Overrides the name derived from ``argv[0]``.
    environ:
        Environment mapping; ``os.environ`` when ``None``.
    cwd:
        Directory the manifest search starts from; the process working
        directory when ``None``.
    engine:
        Pre-built dispatch engine, for tests.

    Returns
    -------
    int
        OS process exit code; :data:`exit_codes.SUCCESS` whenever a command
        was dispatched, regardless of how it ended.
    """
    config = RuntimeConfig.from_environ(environ)
    diagnostics = ConsoleDiagnostics(config)

    context = InvocationContext.from_argv(
        sys.argv if argv is None else argv,
        invoked_name=invoked_name,
    )
    resolved = resolve_context(context, diagnostics=diagnostics)
    if resolved is None:
        print_help()
        return exit_codes.SUCCESS

    if engine is None:
        engine = DispatchEngine(
            SubprocessRunner(),
            locate_manifest,
            diagnostics,
            config=config,
        )
    outcome = engine.dispatch(
        resolved.command,
        resolved.arguments,
        _working_directory(diagnostics) if cwd is None else cwd,
    )
    diagnostics.debug(
        f"Finished via {outcome.path.value} path, status {outcome.exit_status}"
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(*, invoked_name: str | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(invoked_name=invoked_name)
        sys.exit(code)
    except BundleWrapError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", markup=False)
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
