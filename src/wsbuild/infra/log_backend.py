"""Infrastructure: file and remote logging backend.

The remote sink is a centralized log aggregator (ELK or similar).
Records destined for it are buffered in memory as JSON documents and
sent in one batch when the command runner calls
:meth:`StandardLogBackend.flush_remote_log`.

Rules
-----
* Handlers are attached to the ``wsbuild`` logger only, never the root logger.
* Remote delivery failures are logged at WARNING and never raised.
* No user-facing output.
"""

from __future__ import annotations

import json
import logging
import socket
import traceback
import urllib.error
import urllib.request
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from wsbuild.config import RuntimeConfig
from wsbuild.core.logging_setup import ROOT_LOGGER_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Remote sink
# ---------------------------------------------------------------------------

class JsonFormatter(logging.Formatter):
    """Format records as ECS-style JSON documents for the aggregator."""

    def __init__(self, service_name: str = "wsbuild") -> None:
        super().__init__()
        self.service_name = service_name
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        doc: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "message": record.getMessage(),
            "service.name": self.service_name,
            "host.name": self.hostname,
            "process.pid": record.process,
        }
        if record.exc_info and record.exc_info[0] is not None:
            doc["error.type"] = record.exc_info[0].__name__
            doc["error.message"] = str(record.exc_info[1])
            doc["error.stack_trace"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(doc, default=str)


class RemoteLogHandler(logging.Handler):
    """Buffer formatted records until :meth:`send` is called."""

    def __init__(self, url: str | None, *, timeout: float = 10.0) -> None:
        super().__init__()
        self.url = url
        self.timeout = timeout
        self.buffer: list[str] = []
        self.setFormatter(JsonFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        # Our own delivery warnings must not feed back into the buffer.
        if record.name == __name__:
            return
        try:
            self.buffer.append(self.format(record))
        except Exception:
            self.handleError(record)

    def send(self) -> int:
        """POST buffered records as a JSON array and clear the buffer.

        Returns the number of records sent.  Without a configured URL the
        buffer is simply discarded.
        """
        batch, self.buffer = self.buffer, []
        if not batch or not self.url:
            return 0
        body = ("[" + ",".join(batch) + "]").encode("utf-8")
        try:
            request = urllib.request.Request(
                self.url,
                data=body,
                headers={"Content-Type": "application/json"},
                method="POST",
            )
            with urllib.request.urlopen(request, timeout=self.timeout):
                pass
        # ValueError: malformed URL, e.g. no scheme.
        except (urllib.error.URLError, OSError, ValueError) as exc:
            _log.warning("Failed to send %d log records to %s: %s", len(batch), self.url, exc)
            return 0
        return len(batch)


# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

class StandardLogBackend:
    """:class:`~wsbuild.core.protocols.LogBackend` built on :mod:`logging` handlers.

    Parameters
    ----------
    config:
        Runtime configuration; read from the environment when omitted.
    """

    def __init__(self, config: RuntimeConfig | None = None) -> None:
        self.config = config or RuntimeConfig.from_env()
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.remote_handler: RemoteLogHandler | None = None
        self.file_handler: logging.FileHandler | None = None

    def init_file_and_remote_logging(self, filename: str) -> None:
        log_dir = self.config.log_dir or Path.cwd()
        log_dir.mkdir(parents=True, exist_ok=True)
        self.file_handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        self.file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(self.file_handler)
        self.init_remote_only_logging()

    def init_remote_only_logging(self) -> None:
        self.logger.setLevel(self.config.log_level)
        if self.remote_handler is None:
            self.remote_handler = RemoteLogHandler(self.config.remote_log_url)
            self.logger.addHandler(self.remote_handler)

    def flush_remote_log(self) -> None:
        if self.file_handler is not None:
            self.file_handler.flush()
        if self.remote_handler is not None:
            sent = self.remote_handler.send()
            _log.debug("Sent %d log records", sent)

    def close(self) -> None:
        """Detach and close the handlers this backend installed."""
        for handler in (self.file_handler, self.remote_handler):
            if handler is not None:
                self.logger.removeHandler(handler)
                handler.close()
        self.file_handler = None
        self.remote_handler = None
