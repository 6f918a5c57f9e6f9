"""CLI application entry point and command routing for wsbuild.

``main`` looks the command up in the registry and hands it to a
:class:`~wsbuild.cli.runner.CommandRunner`, which is the error boundary
for everything the command does.  ``cli`` wraps ``main`` for the
console script and only adds Ctrl+C handling.

Architecture notes
------------------
* No command logic lives here.
* ``print()`` is forbidden outside the CLI layer; the console writer is
  used exclusively.
"""

from __future__ import annotations

import sys

from wsbuild.cli import exit_codes
from wsbuild.cli.commands.registry import COMMANDS, get_command
from wsbuild.cli.console import ConsoleWriter
from wsbuild.cli.runner import CommandRunner
from wsbuild.infra.log_backend import StandardLogBackend
from wsbuild.infra.workspace_markers import FilesystemWorkspaceHelper


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the wsbuild CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    output = ConsoleWriter()

    if not args:
        args = ["help"]

    name, command_args = args[0], args[1:]
    command = get_command(name)
    if command is None:
        output.write_error(f"Unknown command: {name}")
        output.write_error(f"Available commands: {', '.join(sorted(COMMANDS))}")
        return exit_codes.FAILURE

    backend = StandardLogBackend()
    try:
        runner = CommandRunner(
            command,
            workspace_helper=FilesystemWorkspaceHelper(),
            log_backend=backend,
            output=output,
        )
        return runner.run(command_args)
    finally:
        backend.close()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level entry point invoked by the console script."""
    try:
        code = main()
    except KeyboardInterrupt:
        ConsoleWriter().write_error("\nAborted by user.")
        code = exit_codes.KEYBOARD_INTERRUPT
    sys.exit(code)
