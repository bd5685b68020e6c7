"""Tests for runtime configuration (config.py) and console diagnostics.

Coverage:
* ``BW_DEBUG`` presence toggles verbose mode, whatever its value.
* Defaults match the bundler conventions.
* ``ConsoleDiagnostics`` routes debug to stdout (verbose only) and fatal
  to stderr (always).
"""

from __future__ import annotations

import pytest

from bundle_wrap.cli.diagnostics import ConsoleDiagnostics
from bundle_wrap.config import DEBUG_ENV_VAR, RuntimeConfig


class TestRuntimeConfig:
    def test_defaults(self) -> None:
        config = RuntimeConfig()
        assert config.verbose is False
        assert config.manifest_name == "Gemfile"
        assert config.wrapper_executable == "bundle"
        assert config.wrapper_subcommand == "exec"
        assert config.grace_period == 2.0

    def test_debug_var_absent(self) -> None:
        assert RuntimeConfig.from_environ({}).verbose is False

    @pytest.mark.parametrize("value", ["1", "0", "false", ""])
    def test_debug_var_presence_enables_verbose(self, value: str) -> None:
        assert RuntimeConfig.from_environ({DEBUG_ENV_VAR: value}).verbose is True

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv(DEBUG_ENV_VAR, "yes")
        assert RuntimeConfig.from_environ().verbose is True
        monkeypatch.delenv(DEBUG_ENV_VAR)
        assert RuntimeConfig.from_environ().verbose is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            RuntimeConfig().verbose = True  # type: ignore[misc]


class TestConsoleDiagnostics:
    def test_debug_suppressed_when_not_verbose(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        ConsoleDiagnostics(RuntimeConfig(verbose=False)).debug("hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_debug_to_stdout_when_verbose(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        ConsoleDiagnostics(RuntimeConfig(verbose=True)).debug("Arg: [red]x[/red]")
        captured = capsys.readouterr()
        assert "Arg: [red]x[/red]" in captured.out
        assert captured.err == ""

    @pytest.mark.parametrize("verbose", [True, False])
    def test_fatal_always_to_stderr(
        self, capsys: pytest.CaptureFixture[str], verbose: bool,
    ) -> None:
        ConsoleDiagnostics(RuntimeConfig(verbose=verbose)).fatal("boom")
        captured = capsys.readouterr()
        assert "boom" in captured.err
        assert captured.out == ""
