"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``help``, ``version``) remain functional even when
Rich is not installed.

Informational output goes to stdout so it can be piped; errors go to
stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from wsbuild.exceptions import EnvironmentStateError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentStateError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentStateError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout, or stderr if asked."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


class ConsoleWriter:
	"""User-facing output writer with a plain-``print`` fallback.

	Messages are rendered as literal text: paths and command output may
	contain square brackets that must not be read as Rich markup.
	"""

	def __init__(self) -> None:
		try:
			self._out: Any | None = get_rich_console()
			self._err: Any | None = get_rich_console(stderr=True)
		except EnvironmentStateError:
			self._out = None
			self._err = None

	def write_info(self, text: str) -> None:
		if self._out is None:
			print(text)
			return
		self._write(self._out, text, style="")

	def write_error(self, text: str) -> None:
		if self._err is None:
			print(text, file=sys.stderr)
			return
		self._write(self._err, text, style="red")

	@staticmethod
	def _write(console: Any, text: str, *, style: str) -> None:
		from rich.text import Text

		console.print(Text(text, style=style), soft_wrap=True)
