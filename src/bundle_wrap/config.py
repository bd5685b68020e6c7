"""Runtime configuration for bundle-wrap.

Configuration is read from the environment exactly once, at startup, and
passed down by parameter.  There is no configuration file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

NOMINAL_BINARY_NAME: str = "bw"
"""Canonical binary name; any other invocation name is treated as an alias."""

DEBUG_ENV_VAR: str = "BW_DEBUG"
"""Presence of this variable (any value) enables verbose output."""

MANIFEST_NAME: str = "Gemfile"
WRAPPER_EXECUTABLE: str = "bundle"
WRAPPER_SUBCOMMAND: str = "exec"

RETRY_GRACE_PERIOD_SEC: float = 2.0
"""Wrapped runs failing faster than this are retried as direct runs."""


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable settings for a single invocation."""

    verbose: bool = False
    manifest_name: str = MANIFEST_NAME
    wrapper_executable: str = WRAPPER_EXECUTABLE
    wrapper_subcommand: str = WRAPPER_SUBCOMMAND
    grace_period: float = RETRY_GRACE_PERIOD_SEC

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> RuntimeConfig:
        """Build the configuration from *environ* (``os.environ`` by default).

        Only the presence of :data:`DEBUG_ENV_VAR` matters; an empty value
        still enables verbose output.
        """
        env = os.environ if environ is None else environ
        return cls(verbose=DEBUG_ENV_VAR in env)
