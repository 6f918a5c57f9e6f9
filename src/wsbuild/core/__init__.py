"""Core layer — the command envelope's models, contracts and policies.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; markers are checked through
  :class:`~wsbuild.core.protocols.WorkspaceHelper`.
* No imports from ``cli`` or ``infra``.
"""

from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings, Failure, FailureKind
from wsbuild.core.protocols import Command, LogBackend, OutputWriter, WorkspaceHelper

__all__: list[str] = [
    "Command",
    "CommandLocation",
    "CommandSettings",
    "Failure",
    "FailureKind",
    "InvocationContext",
    "LogBackend",
    "OutputWriter",
    "WorkspaceHelper",
]
