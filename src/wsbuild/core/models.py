"""Domain models for the command execution envelope.

All models are **frozen** dataclasses: immutable value objects built
once per invocation and discarded at process exit.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Command location policy
# ---------------------------------------------------------------------------

class CommandLocation(enum.Enum):
    """Where a command may be invoked from, and how the workspace is found."""

    ROOT_MODULE_DIRECTORY = "root-module-directory"
    WORKSPACE_DIRECTORY = "workspace-directory"
    ANY = "any"
    INSIDE_MODULE_DIRECTORY = "inside-module-directory"


# ---------------------------------------------------------------------------
# Per-command settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSettings:
    """Declarative configuration owned by exactly one command."""

    log_prefix: str
    """Label prepended to every message the command logs."""

    location: CommandLocation
    """Selects the workspace resolution branch."""

    log_file_name: str | None = None
    """When set, logs go to this file as well as the remote sink."""

    measure_elapsed_time: bool = False
    """Report ``Total time: ...`` once the command finishes."""

    require_module_yaml: bool = False
    """Only consulted for :attr:`CommandLocation.ROOT_MODULE_DIRECTORY`."""

    is_hidden_command: bool = False
    """Hidden commands are omitted from the help listing."""

    no_remote_log: bool = False
    """Disable the remote log backend and the final flush."""


# ---------------------------------------------------------------------------
# Failure taxonomy
# ---------------------------------------------------------------------------

class FailureKind(enum.Enum):
    """Severity tier of a failed invocation."""

    ENVIRONMENT = "environment"
    DOMAIN = "domain"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Failure:
    """A classified failure, ready to be logged and shown to the user."""

    kind: FailureKind
    message: str
    cause: BaseException
    hint: str | None = None
    trace: str | None = None
    """Formatted stack trace; only populated for unexpected failures."""
