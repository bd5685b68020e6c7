"""Console-backed implementation of :class:`~bundle_wrap.core.protocols.Diagnostics`.

Debug traces go to stdout and only in verbose mode (``BW_DEBUG`` set).
Fatal messages always go to stderr.  Markup is disabled so that command
arguments containing brackets are printed verbatim.
"""

from __future__ import annotations

from bundle_wrap.cli.console import console, out_console
from bundle_wrap.config import RuntimeConfig


class ConsoleDiagnostics:
    """Diagnostics sink wired from the runtime configuration."""

    def __init__(self, config: RuntimeConfig) -> None:
        self._verbose: bool = config.verbose

    def debug(self, message: str) -> None:
        if self._verbose:
            out_console.print(message, markup=False)

    def fatal(self, message: str) -> None:
        console.print(message, markup=False)
