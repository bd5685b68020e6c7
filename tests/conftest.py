"""Shared pytest fixtures and configuration for the bundle-wrap test suite.

Guidelines
----------
* No real ``bundle`` or Ruby tooling is ever invoked.
* Process spawning is faked at the :class:`ProcessRunner` boundary.
* Time is faked; no test sleeps.
* Filesystem trees are built under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self) -> None:
        self.now: float = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeRunner:
    """Scripted :class:`ProcessRunner`.

    Each entry of ``script`` is ``(result, duration)`` consumed in call
    order: ``result`` is an exit status, or an exception to raise.
    ``duration`` advances the shared clock before returning.
    """

    clock: FakeClock
    script: list[tuple[int | Exception, float]] = field(default_factory=list)
    calls: list[tuple[str, list[str]]] = field(default_factory=list)

    def run(self, executable: str, args: Sequence[str]) -> int:
        self.calls.append((executable, list(args)))
        result, duration = self.script.pop(0)
        self.clock.advance(duration)
        if isinstance(result, Exception):
            raise result
        return result


@dataclass
class RecordingDiagnostics:
    debug_messages: list[str] = field(default_factory=list)
    fatal_messages: list[str] = field(default_factory=list)

    def debug(self, message: str) -> None:
        self.debug_messages.append(message)

    def fatal(self, message: str) -> None:
        self.fatal_messages.append(message)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def runner(clock: FakeClock) -> FakeRunner:
    return FakeRunner(clock=clock)


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """A ``root/`` project holding a Gemfile, with a deep nested directory.

    Layout::

        root/Gemfile
        root/nested/directory/deep/inside/
    """
    root = tmp_path / "root"
    (root / "nested" / "directory" / "deep" / "inside").mkdir(parents=True)
    (root / "Gemfile").write_text("source 'https://rubygems.org'\n")
    return root
