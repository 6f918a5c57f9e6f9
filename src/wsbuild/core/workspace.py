"""Workspace resolution for the command runner.

Maps a command's :class:`~wsbuild.core.models.CommandLocation` onto a
validation rule and a workspace root:

=========================  ==========================================  ===========================
location                   validation                                  workspace root
=========================  ==========================================  ===========================
WORKSPACE_DIRECTORY        cwd is a tracked workspace                  cwd
ROOT_MODULE_DIRECTORY      cwd is a module directory                   parent of cwd
INSIDE_MODULE_DIRECTORY    a module directory encloses cwd             parent of that module
ANY                        none                                        not set
=========================  ==========================================  ===========================
"""

from __future__ import annotations

from wsbuild.core.context import InvocationContext
from wsbuild.core.models import CommandLocation, CommandSettings
from wsbuild.core.protocols import WorkspaceHelper
from wsbuild.exceptions import ConfigurationError, WorkspaceError

MODULE_SPEC_FILE: str = "module.yaml"


def resolve_workspace(
    location: CommandLocation,
    context: InvocationContext,
    helper: WorkspaceHelper,
) -> None:
    """Validate ``context.cwd`` against *location* and record the workspace root.

    Raises
    ------
    WorkspaceError
        When the current directory does not satisfy *location*.
    """
    cwd = context.cwd

    if location is CommandLocation.WORKSPACE_DIRECTORY:
        if not helper.is_tracked_workspace(cwd):
            raise WorkspaceError(f"{cwd} is not a wsbuild workspace directory.")
        context.set_workspace(cwd)

    elif location is CommandLocation.ROOT_MODULE_DIRECTORY:
        if not helper.is_module_directory(cwd):
            raise WorkspaceError(f"{cwd} is not a wsbuild module directory.")
        context.set_workspace(cwd.parent)

    elif location is CommandLocation.INSIDE_MODULE_DIRECTORY:
        module_dir = helper.find_enclosing_module_directory(cwd)
        if module_dir is None:
            raise WorkspaceError("Can't locate module directory")
        context.set_workspace(module_dir.parent)


def check_module_yaml(
    settings: CommandSettings,
    context: InvocationContext,
    helper: WorkspaceHelper,
) -> None:
    """Refuse to run module-root commands on modules that still use the legacy spec.

    Only :attr:`CommandLocation.ROOT_MODULE_DIRECTORY` commands are checked.

    Raises
    ------
    ConfigurationError
        When ``module.yaml`` is required but missing.
    """
    if (
        settings.location is CommandLocation.ROOT_MODULE_DIRECTORY
        and settings.require_module_yaml
        and not helper.module_spec_exists(context.cwd)
    ):
        raise ConfigurationError(
            f"This command requires a {MODULE_SPEC_FILE} file.\n"
            f"Use convert-spec to convert the old spec to {MODULE_SPEC_FILE}.",
        )
