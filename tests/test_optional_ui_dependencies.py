"""Regression tests for the optional Rich dependency.

The help text, diagnostics and the error boundary must keep working with
plain ``print`` when Rich cannot be imported.
"""

from __future__ import annotations

import sys

import pytest

from bundle_wrap.cli import exit_codes
from bundle_wrap.cli.app import main
from bundle_wrap.cli.diagnostics import ConsoleDiagnostics
from bundle_wrap.config import RuntimeConfig


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["bw"], environ={})

    assert code == exit_codes.SUCCESS
    assert "Gemfile" in capsys.readouterr().out


def test_diagnostics_work_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    diagnostics = ConsoleDiagnostics(RuntimeConfig(verbose=True))

    diagnostics.debug("trace")
    diagnostics.fatal("fatal")

    captured = capsys.readouterr()
    assert captured.out == "trace\n"
    assert captured.err == "fatal\n"
