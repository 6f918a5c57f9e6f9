"""``wsbuild version`` — print the tool version."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from wsbuild.cli import exit_codes
from wsbuild.cli.commands.base import CommandArgumentParser
from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings
from wsbuild.version import __version__


class VersionCommand:
    name = "version"
    settings = CommandSettings(
        log_prefix="VERSION",
        location=CommandLocation.ANY,
        no_remote_log=True,
    )
    help_message = "Prints the wsbuild version\n\nUsage:\n    wsbuild version"

    def parse_args(self, args: Sequence[str]) -> argparse.Namespace:
        return CommandArgumentParser(self.name).parse_args(args)

    def execute(self, parsed: argparse.Namespace, context: InvocationContext) -> int:
        context.output.write_info(f"wsbuild {__version__}")
        return exit_codes.SUCCESS
