"""Argument parsing shared by the built-in commands."""

from __future__ import annotations

import argparse
from typing import NoReturn

from wsbuild.exceptions import CommandUsageError


class CommandArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting the process.

    The command runner owns the process exit code, so parse errors are
    reported as :class:`~wsbuild.exceptions.CommandUsageError`.
    """

    def __init__(self, command_name: str) -> None:
        super().__init__(prog=f"wsbuild {command_name}", add_help=False)

    def error(self, message: str) -> NoReturn:
        raise CommandUsageError(message, hint=f"See: wsbuild help {self.prog.split()[-1]}")
