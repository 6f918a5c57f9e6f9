"""Tests for the built-in commands (cli/commands/).

Commands are exercised directly with a fake output writer; the runner
is covered in ``test_runner.py``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeOutput
from wsbuild import __version__
from wsbuild.cli import exit_codes
from wsbuild.cli.commands.check_spec import CheckSpecCommand
from wsbuild.cli.commands.help import HelpCommand
from wsbuild.cli.commands.init import InitCommand
from wsbuild.cli.commands.module_info import ModuleInfoCommand
from wsbuild.cli.commands.registry import COMMANDS, get_command
from wsbuild.cli.commands.version import VersionCommand
from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation
from wsbuild.exceptions import CommandUsageError, WorkspaceError


def _context(cwd: Path, output: FakeOutput) -> InvocationContext:
    return InvocationContext(cwd, output)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_known_names(self) -> None:
        assert set(COMMANDS) == {"check-spec", "help", "init", "module-info", "version"}

    @pytest.mark.parametrize("name", sorted(COMMANDS))
    def test_factories_build_matching_commands(self, name: str) -> None:
        command = get_command(name)
        assert command is not None
        assert command.name == name
        assert command.help_message.splitlines()[0]

    def test_unknown_name(self) -> None:
        assert get_command("nope") is None


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestArgumentParsing:
    def test_unexpected_argument_raises_usage_error(self) -> None:
        with pytest.raises(CommandUsageError) as exc_info:
            VersionCommand().parse_args(["--verbose"])
        assert "unrecognized arguments" in str(exc_info.value)
        assert exc_info.value.hint == "See: wsbuild help version"

    def test_help_takes_optional_name(self) -> None:
        command = HelpCommand(COMMANDS)
        assert command.parse_args([]).command is None
        assert command.parse_args(["init"]).command == "init"


# ---------------------------------------------------------------------------
# help
# ---------------------------------------------------------------------------

class TestHelpCommand:
    def test_listing_hides_hidden_commands(self, tmp_path: Path) -> None:
        output = FakeOutput()
        command = HelpCommand(COMMANDS)
        code = command.execute(command.parse_args([]), _context(tmp_path, output))
        assert code == exit_codes.SUCCESS
        text = "\n".join(output.info)
        assert "init" in text
        assert "module-info" in text
        assert "check-spec" not in text

    def test_single_command_help(self, tmp_path: Path) -> None:
        output = FakeOutput()
        command = HelpCommand(COMMANDS)
        command.execute(command.parse_args(["init"]), _context(tmp_path, output))
        assert output.info == [InitCommand.help_message]

    def test_unknown_command_raises(self, tmp_path: Path) -> None:
        command = HelpCommand(COMMANDS)
        with pytest.raises(CommandUsageError, match="Unknown command: nope"):
            command.execute(command.parse_args(["nope"]), _context(tmp_path, FakeOutput()))

    def test_settings(self) -> None:
        settings = HelpCommand(COMMANDS).settings
        assert settings.location is CommandLocation.ANY
        assert settings.no_remote_log is True


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------

class TestVersionCommand:
    def test_prints_version(self, tmp_path: Path) -> None:
        output = FakeOutput()
        command = VersionCommand()
        code = command.execute(command.parse_args([]), _context(tmp_path, output))
        assert code == exit_codes.SUCCESS
        assert output.info == [f"wsbuild {__version__}"]


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

class TestInitCommand:
    def test_marks_workspace(self, tmp_path: Path) -> None:
        output = FakeOutput()
        command = InitCommand()
        code = command.execute(command.parse_args([]), _context(tmp_path, output))
        assert code == exit_codes.SUCCESS
        assert (tmp_path / ".wsbuild").is_dir()
        assert output.info == [f"Initialized wsbuild workspace in {tmp_path}"]

    def test_already_initialized(self, workspace_tree: dict[str, Path]) -> None:
        output = FakeOutput()
        command = InitCommand()
        command.execute(command.parse_args([]), _context(workspace_tree["ws"], output))
        assert output.info == [f"{workspace_tree['ws']} is already a wsbuild workspace"]


# ---------------------------------------------------------------------------
# module-info
# ---------------------------------------------------------------------------

class TestModuleInfoCommand:
    def test_reports_module_and_workspace(self, workspace_tree: dict[str, Path]) -> None:
        output = FakeOutput()
        ws = workspace_tree["ws"].resolve()
        ctx = _context(workspace_tree["nested"], output)
        ctx.set_workspace(ws)
        command = ModuleInfoCommand()
        assert command.execute(command.parse_args([]), ctx) == exit_codes.SUCCESS
        assert output.info == ["Module: app", f"Workspace: {ws}"]

    def test_unresolved_workspace_raises(self, tmp_path: Path) -> None:
        output = FakeOutput()
        command = ModuleInfoCommand()
        with pytest.raises(WorkspaceError, match="Can't locate module directory"):
            command.execute(command.parse_args([]), _context(tmp_path, output))
        assert output.info == []


# ---------------------------------------------------------------------------
# check-spec
# ---------------------------------------------------------------------------

class TestCheckSpecCommand:
    def test_settings_require_yaml_at_module_root(self) -> None:
        settings = CheckSpecCommand().settings
        assert settings.location is CommandLocation.ROOT_MODULE_DIRECTORY
        assert settings.require_module_yaml is True
        assert settings.is_hidden_command is True

    def test_reports_module(self, workspace_tree: dict[str, Path]) -> None:
        output = FakeOutput()
        command = CheckSpecCommand()
        ctx = _context(workspace_tree["app"], output)
        assert command.execute(command.parse_args([]), ctx) == exit_codes.SUCCESS
        assert output.info == ["module.yaml found in app"]
