"""Per-invocation state shared by the phases of a command run.

The workspace root and the logger are process-wide in spirit, but they
live here instead of in module globals so that each run (and each test)
gets its own copy.  Both are write-once.
"""

from __future__ import annotations

import logging
from pathlib import Path

from wsbuild.core.protocols import OutputWriter


class InvocationContext:
    """State established while a single command invocation runs.

    Parameters
    ----------
    cwd:
        Directory the command was invoked from.
    output:
        Writer for user-facing messages.
    """

    def __init__(self, cwd: Path, output: OutputWriter) -> None:
        self.cwd: Path = cwd
        self.output: OutputWriter = output
        self._workspace: Path | None = None
        self._logger: logging.LoggerAdapter[logging.Logger] | None = None

    @property
    def workspace(self) -> Path | None:
        """Resolved workspace root, or ``None`` for location-agnostic commands."""
        return self._workspace

    def set_workspace(self, path: Path) -> None:
        if self._workspace is not None:
            raise RuntimeError(f"Workspace already set to {self._workspace}")
        self._workspace = path

    @property
    def logger(self) -> logging.LoggerAdapter[logging.Logger] | None:
        return self._logger

    def set_logger(self, logger: logging.LoggerAdapter[logging.Logger]) -> None:
        if self._logger is not None:
            raise RuntimeError("Logger already initialized for this invocation")
        self._logger = logger
