"""Process configuration read from the environment.

Honors:

* ``WSBUILD_LOG_LEVEL``: level name (``"DEBUG"``, ``"WARN"``...) or number.
* ``WSBUILD_LOG_DIR``: directory for command log files.
* ``WSBUILD_REMOTE_LOG_URL``: endpoint receiving batched JSON log records.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_LEVEL: int = logging.INFO

_LEVEL_NAMES: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def parse_log_level(value: str | None) -> int | None:
    """Return a logging level for *value*, or ``None`` if it is unset or unknown."""
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def default_log_dir() -> Path:
    return Path.home() / ".wsbuild" / "logs"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Environment-derived settings shared by every command."""

    log_level: int = DEFAULT_LOG_LEVEL
    log_dir: Path | None = None
    remote_log_url: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuntimeConfig:
        env = os.environ if environ is None else environ
        log_dir = env.get("WSBUILD_LOG_DIR")
        log_level = parse_log_level(env.get("WSBUILD_LOG_LEVEL"))
        return cls(
            log_level=DEFAULT_LOG_LEVEL if log_level is None else log_level,
            log_dir=Path(log_dir) if log_dir else default_log_dir(),
            remote_log_url=env.get("WSBUILD_REMOTE_LOG_URL") or None,
        )
