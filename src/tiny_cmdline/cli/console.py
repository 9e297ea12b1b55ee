"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
help and error paths stay functional even when Rich is not installed.

Two streams are used:

* stdout — usage text (plain, no markup, no wrapping).
* stderr — diagnostics and errors (Rich markup allowed).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from tiny_cmdline.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; a no-op when Rich is not installed."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render to stderr with Rich markup when available, else plain print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, highlight=False)

	def out(self, text: str) -> None:
		"""Write *text* to stdout verbatim (no markup, no wrapping)."""
		try:
			rich_console = get_rich_console(stderr=False)
		except MissingDependencyError:
			sys.stdout.write(text)
			sys.stdout.flush()
			return
		rich_console.out(text, end="", highlight=False)


console = _ConsoleProxy()


def configure_logging(level: int = logging.INFO) -> logging.Logger:
	"""Attach a Rich log handler on stderr to the ``tiny_cmdline`` logger.

	Calling it again replaces the previously attached handlers.
	"""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc

	logger = logging.getLogger("tiny_cmdline")
	logger.setLevel(level)
	for handler in list(logger.handlers):
		if not isinstance(handler, logging.NullHandler):
			logger.removeHandler(handler)
			handler.close()

	handler = RichHandler(
		console=get_rich_console(),
		show_path=False,
		markup=False,
	)
	handler.setLevel(level)
	logger.addHandler(handler)
	return logger
