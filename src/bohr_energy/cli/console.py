"""CLI console helpers with optional Rich support.

Rich is imported lazily on every print so the calculator keeps working
with plain ``print`` output when Rich is not installed.  User-supplied
text is never interpreted as Rich markup.
"""

from __future__ import annotations

import sys
from typing import Any

from bohr_energy.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console targeting stdout, or stderr when asked."""
	console_class = _load_rich_console_class()
	return console_class(
		stderr=stderr,
		soft_wrap=True,
		markup=False,
		highlight=False,
		emoji=False,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout, flush=True)
			return
		rich_console.print(*objects, style=style)


console = _ConsoleProxy()
"""Dialogue output: prompts, rejections and results (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Error-boundary output (stderr)."""
