"""Command runner: the execution envelope shared by every wsbuild command.

A run is one transaction per process invocation:

1. Resolve and validate the workspace for the command's location.
2. Enforce the ``module.yaml`` precondition for module-root commands.
3. Initialize logging.
4. Parse the command's arguments.
5. Execute the command, capturing its exit code.
6. Flush buffered remote log records (unless disabled).
7. Report the elapsed time (if requested).

This module is the **sole error boundary** for commands: any exception
raised by any step is classified, logged and rendered, and the run
returns :data:`~wsbuild.cli.exit_codes.FAILURE`.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from datetime import timedelta
from pathlib import Path

from wsbuild.cli import exit_codes
from wsbuild.core import classifier
from wsbuild.core.context import InvocationContext
from wsbuild.core.logging_setup import ROOT_LOGGER_NAME, init_logging
from wsbuild.core.models import Failure
from wsbuild.core.protocols import Command, LogBackend, OutputWriter, WorkspaceHelper
from wsbuild.core.workspace import check_module_yaml, resolve_workspace

_fallback_log = logging.getLogger(ROOT_LOGGER_NAME)


def format_elapsed(seconds: float) -> str:
    """Render *seconds* as ``H:MM:SS.ffffff``."""
    return str(timedelta(seconds=seconds))


class CommandRunner:
    """Runs a single :class:`~wsbuild.core.protocols.Command` through the envelope.

    Parameters
    ----------
    command:
        The command to run.
    workspace_helper:
        Workspace and module marker detection.
    log_backend:
        File and remote logging backend.
    output:
        Writer for user-facing messages.
    cwd:
        Directory the command runs in.  Defaults to the process cwd.
    clock:
        Monotonic clock used for the elapsed-time report.
    """

    def __init__(
        self,
        command: Command,
        *,
        workspace_helper: WorkspaceHelper,
        log_backend: LogBackend,
        output: OutputWriter,
        cwd: Path | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._command = command
        self._settings = command.settings
        self._workspace_helper = workspace_helper
        self._log_backend = log_backend
        self._output = output
        self._cwd = cwd
        self._clock = clock

    def run(self, args: Sequence[str]) -> int:
        """Run the command with *args* and return the process exit code.

        The exit code returned by the command is passed through verbatim.
        Any exception yields :data:`~wsbuild.cli.exit_codes.FAILURE`.
        """
        started = self._clock()
        context = InvocationContext(self._cwd or Path.cwd(), self._output)
        try:
            return self._run_steps(args, context)
        except Exception as exc:
            self._report_failure(classifier.classify(exc), context)
            return exit_codes.FAILURE
        finally:
            if self._settings.measure_elapsed_time:
                self._report_elapsed(self._clock() - started, context)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _run_steps(self, args: Sequence[str], context: InvocationContext) -> int:
        settings = self._settings

        resolve_workspace(settings.location, context, self._workspace_helper)
        check_module_yaml(settings, context, self._workspace_helper)
        logger = init_logging(self._command.name, settings, self._log_backend, context)

        logger.debug("Parsing args: [%s] in %s", " ".join(args), context.cwd)
        parsed = self._command.parse_args(args)
        logger.debug("OK parsing args")

        exit_code = self._command.execute(parsed, context)

        if not settings.no_remote_log:
            self._log_backend.flush_remote_log()
        return exit_code

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @staticmethod
    def _logger(
        context: InvocationContext,
    ) -> logging.LoggerAdapter[logging.Logger] | logging.Logger:
        # Failures before step 3 have no command logger yet.
        return context.logger if context.logger is not None else _fallback_log

    def _report_failure(self, failure: Failure, context: InvocationContext) -> None:
        self._logger(context).log(
            classifier.log_level_for(failure),
            "Failed to %s",
            self._command.name,
            exc_info=failure.cause,
        )
        for line in classifier.user_lines(failure):
            self._output.write_error(line)

    def _report_elapsed(self, seconds: float, context: InvocationContext) -> None:
        message = f"Total time: {format_elapsed(seconds)}"
        self._output.write_info(message)
        self._logger(context).debug(message)
