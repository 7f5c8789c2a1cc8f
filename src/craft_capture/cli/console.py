"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from craft_capture.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyMissingError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def _escape(text: str) -> str:
	from rich.markup import escape

	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except DependencyMissingError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render an ``Error:`` line and optional ``Hint:`` line.

		*message* and *hint* may carry user or server text, so they are
		markup-escaped on the Rich path.
		"""
		try:
			rich_console = get_rich_console()
		except DependencyMissingError:
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return
		rich_console.print(f"[bold red]Error:[/bold red] {_escape(message)}")
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {_escape(hint)}")


console = _ConsoleProxy()
