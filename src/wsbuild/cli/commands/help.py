"""``wsbuild help`` — list commands or show one command's usage."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Mapping, Sequence

from wsbuild.cli import exit_codes
from wsbuild.cli.commands.base import CommandArgumentParser
from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings
from wsbuild.core.protocols import Command
from wsbuild.exceptions import CommandUsageError


class HelpCommand:
    """Render help from the registry it is given.

    Parameters
    ----------
    commands:
        Command name to factory, as held by the registry.
    """

    name = "help"
    settings = CommandSettings(
        log_prefix="HELP",
        location=CommandLocation.ANY,
        no_remote_log=True,
    )
    help_message = (
        "Shows help for wsbuild commands\n"
        "\n"
        "Usage:\n"
        "    wsbuild help [<command>]"
    )

    def __init__(self, commands: Mapping[str, Callable[[], Command]]) -> None:
        self._commands = commands

    def parse_args(self, args: Sequence[str]) -> argparse.Namespace:
        parser = CommandArgumentParser(self.name)
        parser.add_argument("command", nargs="?", default=None)
        return parser.parse_args(args)

    def execute(self, parsed: argparse.Namespace, context: InvocationContext) -> int:
        if parsed.command is None:
            for line in self.listing():
                context.output.write_info(line)
            return exit_codes.SUCCESS

        factory = self._commands.get(parsed.command)
        if factory is None:
            raise CommandUsageError(
                f"Unknown command: {parsed.command}",
                hint="Run 'wsbuild help' to list commands.",
            )
        context.output.write_info(factory().help_message)
        return exit_codes.SUCCESS

    def listing(self) -> list[str]:
        """One line per visible command: name and the first line of its help."""
        lines = ["Commands:"]
        for name in sorted(self._commands):
            command = self._commands[name]()
            if command.settings.is_hidden_command:
                continue
            summary = command.help_message.splitlines()[0]
            lines.append(f"    {name:<14} {summary}")
        return lines
