"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exposed:

* :data:`console` — status and error messages on stderr, Rich markup,
  never wrapped.
* :data:`report_console` — the report on stdout, written verbatim.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any

from spanish_checker.exceptions import DependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyError(
			"rich no está instalado. Instálalo con: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy for stderr with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except DependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, soft_wrap=True)


class _ReportProxy:
	"""Writes report lines to stdout exactly as rendered.

	Rich is not involved here: it would expand tabs and drop control
	characters such as ``\\r`` that belong to the quoted snippets.
	"""

	def write_lines(self, lines: Iterable[str]) -> None:
		"""Write each line followed by a newline, unchanged."""
		for line in lines:
			sys.stdout.write(line + "\n")
		sys.stdout.flush()


console = _ConsoleProxy()
report_console = _ReportProxy()
