"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that the
bootstrap path (help text, plain dispatch) keeps working even when Rich is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from bundle_wrap.exceptions import BundleWrapError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``BundleWrapError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise BundleWrapError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except BundleWrapError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(
			*objects,
			markup=markup,
			emoji=markup,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy(stderr=True)
out_console = _ConsoleProxy(stderr=False)
