"""``wsbuild init`` — mark the current directory as a tracked workspace."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from wsbuild.cli import exit_codes
from wsbuild.cli.commands.base import CommandArgumentParser
from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings
from wsbuild.infra.workspace_markers import WORKSPACE_MARKER, mark_workspace

log = logging.getLogger(__name__)


class InitCommand:
    name = "init"
    settings = CommandSettings(
        log_prefix="INIT",
        location=CommandLocation.ANY,
        log_file_name="init.log",
        measure_elapsed_time=True,
    )
    help_message = (
        "Marks the current directory as a wsbuild workspace\n"
        "\n"
        "Usage:\n"
        "    wsbuild init\n"
        "\n"
        f"Creates a {WORKSPACE_MARKER} directory; modules are cloned next to it."
    )

    def parse_args(self, args: Sequence[str]) -> argparse.Namespace:
        return CommandArgumentParser(self.name).parse_args(args)

    def execute(self, parsed: argparse.Namespace, context: InvocationContext) -> int:
        if mark_workspace(context.cwd):
            log.debug("Created %s in %s", WORKSPACE_MARKER, context.cwd)
            context.output.write_info(f"Initialized wsbuild workspace in {context.cwd}")
        else:
            context.output.write_info(f"{context.cwd} is already a wsbuild workspace")
        return exit_codes.SUCCESS
