"""Infrastructure: blocking child-process execution.

This module is the **only** place in the codebase that spawns processes.
The child inherits stdin, stdout and stderr so that interactive commands
behave as if run from the shell; nothing is captured.  ``OSError``
raised while starting the child is re-raised as
:class:`~bundle_wrap.exceptions.SpawnFailedError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from bundle_wrap.exceptions import SpawnFailedError


class SubprocessRunner:
    """Concrete :class:`~bundle_wrap.core.protocols.ProcessRunner` on :mod:`subprocess`.

    Executables are looked up on ``PATH`` by the OS; there is no timeout,
    the call blocks until the child exits.
    """

    def run(self, executable: str, args: Sequence[str]) -> int:
        """Run *executable* with *args* and return its exit status.

        A child killed by a signal reports a negative status, as
        :attr:`subprocess.CompletedProcess.returncode` does.

        Raises
        ------
        SpawnFailedError
            When the executable is missing or cannot be executed.
        """
        try:
            completed = subprocess.run([executable, *args], check=False)
        except OSError as exc:
            raise SpawnFailedError(
                f"Unable to start {executable}: {exc.strerror or exc}",
                executable=executable,
                hint=f"Check that '{executable}' is installed and on PATH.",
            ) from exc
        return completed.returncode
