"""``wsbuild module-info`` — show which module and workspace the cwd belongs to."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from wsbuild.cli import exit_codes
from wsbuild.cli.commands.base import CommandArgumentParser
from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings
from wsbuild.exceptions import WorkspaceError


class ModuleInfoCommand:
    name = "module-info"
    settings = CommandSettings(
        log_prefix="MODULE-INFO",
        location=CommandLocation.INSIDE_MODULE_DIRECTORY,
    )
    help_message = (
        "Shows the module enclosing the current directory\n"
        "\n"
        "Usage:\n"
        "    wsbuild module-info"
    )

    def parse_args(self, args: Sequence[str]) -> argparse.Namespace:
        return CommandArgumentParser(self.name).parse_args(args)

    def execute(self, parsed: argparse.Namespace, context: InvocationContext) -> int:
        workspace = context.workspace
        if workspace is None:
            raise WorkspaceError("Can't locate module directory")
        module = context.cwd.resolve().relative_to(workspace).parts[0]
        context.output.write_info(f"Module: {module}")
        context.output.write_info(f"Workspace: {workspace}")
        return exit_codes.SUCCESS
