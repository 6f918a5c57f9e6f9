"""Protocols (interfaces) consumed by the core layer.

These define the contracts that commands and infrastructure adapters
must satisfy.  The command runner depends ONLY on these protocols,
never on concrete implementations, so every collaborator can be
replaced by a fake in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from wsbuild.core.context import InvocationContext
    from wsbuild.core.models import CommandSettings


class Command(Protocol):
    """Capability set every concrete command provides.

    Commands signal expected failures by raising a
    :class:`~wsbuild.exceptions.WsbuildError` subclass; the runner
    classifies whatever escapes.
    """

    name: str
    settings: CommandSettings
    help_message: str
    """Usage text; its first line is the summary shown by ``wsbuild help``."""

    def parse_args(self, args: Sequence[str]) -> Any:
        """Parse the command's own arguments (the command name excluded).

        Raises
        ------
        CommandUsageError
            When the arguments are invalid.
        """
        ...  # pragma: no cover

    def execute(self, parsed: Any, context: InvocationContext) -> int:
        """Run the command and return its process exit code."""
        ...  # pragma: no cover


class WorkspaceHelper(Protocol):
    """Contract for workspace and module marker detection."""

    def is_tracked_workspace(self, path: Path) -> bool:
        ...  # pragma: no cover

    def is_module_directory(self, path: Path) -> bool:
        ...  # pragma: no cover

    def find_enclosing_module_directory(self, path: Path) -> Path | None:
        """Return the nearest module directory at or above *path*, if any."""
        ...  # pragma: no cover

    def module_spec_exists(self, path: Path) -> bool:
        """Return whether *path* holds a ``module.yaml`` file."""
        ...  # pragma: no cover


class LogBackend(Protocol):
    """Contract for the file and remote logging backend.

    Implementations must never raise from :meth:`flush_remote_log`
    because of delivery problems; they report them through logging.
    """

    def init_file_and_remote_logging(self, filename: str) -> None:
        ...  # pragma: no cover

    def init_remote_only_logging(self) -> None:
        ...  # pragma: no cover

    def flush_remote_log(self) -> None:
        """Send any buffered remote log records.  Blocks until done."""
        ...  # pragma: no cover


class OutputWriter(Protocol):
    """Contract for user-facing console output."""

    def write_info(self, text: str) -> None:
        ...  # pragma: no cover

    def write_error(self, text: str) -> None:
        ...  # pragma: no cover
