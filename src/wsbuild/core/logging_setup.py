"""Per-command logger bootstrap.

Builds the prefixed logger a command writes through and asks the
logging backend to attach the file and/or remote handlers the command's
settings call for.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import MutableMapping
from typing import Any

from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandSettings
from wsbuild.core.protocols import LogBackend
from wsbuild.version import get_version_title

ROOT_LOGGER_NAME: str = "wsbuild"


class PrefixLoggerAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Logger adapter rendering every message as ``[<prefix>] <msg>``."""

    def __init__(self, prefix: str, logger: logging.Logger) -> None:
        super().__init__(logger, {"log_prefix": prefix})
        self.prefix: str = prefix

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        return f"[{self.prefix}] {msg}", kwargs


def init_logging(
    command_name: str,
    settings: CommandSettings,
    backend: LogBackend,
    context: InvocationContext,
) -> PrefixLoggerAdapter:
    """Create the command's logger, select a backend and record both in *context*.

    Backend selection:

    * ``log_file_name`` set: file and remote logging.
    * otherwise, unless ``no_remote_log``: remote logging only.
    * otherwise: no backend; the prefixed logger is still created.
    """
    logger = PrefixLoggerAdapter(
        settings.log_prefix,
        logging.getLogger(f"{ROOT_LOGGER_NAME}.{command_name}"),
    )
    context.set_logger(logger)

    if settings.log_file_name is not None:
        backend.init_file_and_remote_logging(settings.log_file_name)
    elif not settings.no_remote_log:
        backend.init_remote_only_logging()

    log_version(logger)
    return logger


def log_version(logger: logging.LoggerAdapter[logging.Logger]) -> None:
    """Log the wsbuild version; failing to do so never aborts a command."""
    with contextlib.suppress(Exception):
        logger.info("wsbuild version: %s", get_version_title())
