"""Failure classification for the command runner.

Every exception that escapes a command run is turned into a
:class:`~wsbuild.core.models.Failure`.  All tiers exit with the same
code; they differ only in log severity and in whether the stack trace is
shown to the user.

==============  ===========  ============================
tier            log level    user sees
==============  ===========  ============================
ENVIRONMENT     WARNING      message
DOMAIN          ERROR        message
UNEXPECTED      ERROR        message and stack trace
==============  ===========  ============================
"""

from __future__ import annotations

import logging
import traceback

from wsbuild.core.models import Failure, FailureKind
from wsbuild.exceptions import EnvironmentStateError, WsbuildError

LOG_LEVELS: dict[FailureKind, int] = {
    FailureKind.ENVIRONMENT: logging.WARNING,
    FailureKind.DOMAIN: logging.ERROR,
    FailureKind.UNEXPECTED: logging.ERROR,
}


def classify(exc: Exception) -> Failure:
    """Map *exc* onto its failure tier."""
    if isinstance(exc, EnvironmentStateError):
        return Failure(FailureKind.ENVIRONMENT, str(exc), exc, hint=exc.hint)
    if isinstance(exc, WsbuildError):
        return Failure(FailureKind.DOMAIN, str(exc), exc, hint=exc.hint)
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    message = str(exc) or type(exc).__name__
    return Failure(FailureKind.UNEXPECTED, message, exc, trace=trace)


def log_level_for(failure: Failure) -> int:
    return LOG_LEVELS[failure.kind]


def user_lines(failure: Failure) -> list[str]:
    """Return the error lines to show the user, in display order."""
    lines = [failure.message]
    if failure.hint:
        lines.append(failure.hint)
    if failure.kind is FailureKind.UNEXPECTED and failure.trace:
        lines.append(failure.trace)
    return lines
