"""Shared pytest fixtures and configuration for the wsbuild test suite.

Guidelines
----------
* No network access in any test.
* Collaborators of the command runner are replaced by the fakes below.
* Filesystem tests use ``tmp_path`` only; log files never land in ``~``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest

from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings


# ---------------------------------------------------------------------------
# Fakes for the runner's collaborators
# ---------------------------------------------------------------------------

class FakeOutput:
    def __init__(self) -> None:
        self.info: list[str] = []
        self.errors: list[str] = []

    def write_info(self, text: str) -> None:
        self.info.append(text)

    def write_error(self, text: str) -> None:
        self.errors.append(text)

    @property
    def lines(self) -> list[str]:
        return self.info + self.errors


class FakeWorkspaceHelper:
    def __init__(
        self,
        *,
        tracked: Sequence[Path] = (),
        modules: Sequence[Path] = (),
        with_spec: Sequence[Path] = (),
    ) -> None:
        self.tracked = set(tracked)
        self.modules = set(modules)
        self.with_spec = set(with_spec)
        self.spec_checks: list[Path] = []

    def is_tracked_workspace(self, path: Path) -> bool:
        return path in self.tracked

    def is_module_directory(self, path: Path) -> bool:
        return path in self.modules

    def find_enclosing_module_directory(self, path: Path) -> Path | None:
        for candidate in (path, *path.parents):
            if candidate in self.modules:
                return candidate
        return None

    def module_spec_exists(self, path: Path) -> bool:
        self.spec_checks.append(path)
        return path in self.with_spec


class FakeLogBackend:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def init_file_and_remote_logging(self, filename: str) -> None:
        self.calls.append(("file_and_remote", filename))

    def init_remote_only_logging(self) -> None:
        self.calls.append(("remote_only",))

    def flush_remote_log(self) -> None:
        self.calls.append(("flush",))


class FakeCommand:
    """Command whose behaviour is scripted per test."""

    help_message = "Does fake things\n\nUsage:\n    wsbuild fake"

    def __init__(
        self,
        settings: CommandSettings,
        *,
        exit_code: int = 0,
        parse_error: Exception | None = None,
        execute_error: Exception | None = None,
        name: str = "fake",
    ) -> None:
        self.name = name
        self.settings = settings
        self.exit_code = exit_code
        self.parse_error = parse_error
        self.execute_error = execute_error
        self.parsed_args: list[str] | None = None
        self.executed = False
        self.context: InvocationContext | None = None

    def parse_args(self, args: Sequence[str]) -> Any:
        if self.parse_error is not None:
            raise self.parse_error
        self.parsed_args = list(args)
        return {"args": list(args)}

    def execute(self, parsed: Any, context: InvocationContext) -> int:
        self.executed = True
        self.context = context
        if self.execute_error is not None:
            raise self.execute_error
        return self.exit_code


def make_settings(**overrides: Any) -> CommandSettings:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, Any] = {
        "log_prefix": "FAKE",
        "location": CommandLocation.ANY,
    }
    defaults.update(overrides)
    return CommandSettings(**defaults)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def output() -> FakeOutput:
    return FakeOutput()


@pytest.fixture
def backend() -> FakeLogBackend:
    return FakeLogBackend()


@pytest.fixture
def workspace_tree(tmp_path: Path) -> dict[str, Path]:
    """A workspace holding one migrated and one legacy module.

    ::

        ws/.wsbuild/
        ws/app/module.yaml
        ws/app/src/pkg/
        ws/legacy/.wsbuild-spec
    """
    ws = tmp_path / "ws"
    (ws / ".wsbuild").mkdir(parents=True)
    app = ws / "app"
    (app / "src" / "pkg").mkdir(parents=True)
    (app / "module.yaml").write_text("default:\n", encoding="utf-8")
    legacy = ws / "legacy"
    legacy.mkdir()
    (legacy / ".wsbuild-spec").write_text("", encoding="utf-8")
    return {"ws": ws, "app": app, "nested": app / "src" / "pkg", "legacy": legacy}


@pytest.fixture(autouse=True)
def _isolate_wsbuild_logger(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    """Keep handlers and levels set by one test out of the next."""
    monkeypatch.setenv("WSBUILD_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("WSBUILD_REMOTE_LOG_URL", raising=False)
    monkeypatch.delenv("WSBUILD_LOG_LEVEL", raising=False)
    logger = logging.getLogger("wsbuild")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
