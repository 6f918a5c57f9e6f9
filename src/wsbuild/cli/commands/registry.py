"""Name to factory mapping for the built-in commands."""

from __future__ import annotations

from collections.abc import Callable

from wsbuild.cli.commands.check_spec import CheckSpecCommand
from wsbuild.cli.commands.help import HelpCommand
from wsbuild.cli.commands.init import InitCommand
from wsbuild.cli.commands.module_info import ModuleInfoCommand
from wsbuild.cli.commands.version import VersionCommand
from wsbuild.core.protocols import Command

COMMANDS: dict[str, Callable[[], Command]] = {
    "check-spec": CheckSpecCommand,
    "init": InitCommand,
    "module-info": ModuleInfoCommand,
    "version": VersionCommand,
}
COMMANDS["help"] = lambda: HelpCommand(COMMANDS)


def get_command(name: str) -> Command | None:
    """Instantiate the command registered under *name*, if any."""
    factory = COMMANDS.get(name)
    return factory() if factory is not None else None
