"""Custom exception hierarchy for wsbuild.

Every failure a command is *expected* to produce must inherit from
:class:`WsbuildError`.  Anything else that reaches the command runner is
treated as a tool bug and reported together with its stack trace.

Hierarchy
---------
WsbuildError
├── WorkspaceError
├── ConfigurationError
├── CommandUsageError
└── EnvironmentStateError
    └── LocalChangesError
"""

from __future__ import annotations


class WsbuildError(Exception):
    """Base exception for all recognised wsbuild failures.

    The command runner renders these as a clean message without a stack
    trace and logs them at ERROR severity.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Workspace / module location -------------------------------------------

class WorkspaceError(WsbuildError):
    """Raised when the current directory does not satisfy a command's location."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(WsbuildError):
    """Raised when a module or workspace configuration is missing or outdated."""


# --- Arguments -------------------------------------------------------------

class CommandUsageError(WsbuildError):
    """Raised by a command when its arguments cannot be parsed."""


# --- User environment state ------------------------------------------------

class EnvironmentStateError(WsbuildError):
    """Raised when the user's local state blocks a command.

    These are expected operational conditions rather than tool failures,
    so they are logged at WARNING severity.
    """


class LocalChangesError(EnvironmentStateError):
    """Raised when uncommitted local changes prevent an operation."""
