"""Infrastructure layer — filesystem markers and logging transports.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Implements the protocols declared in :mod:`wsbuild.core.protocols`.
"""

from wsbuild.infra.log_backend import JsonFormatter, RemoteLogHandler, StandardLogBackend
from wsbuild.infra.workspace_markers import FilesystemWorkspaceHelper, mark_workspace

__all__: list[str] = [
    "FilesystemWorkspaceHelper",
    "JsonFormatter",
    "RemoteLogHandler",
    "StandardLogBackend",
    "mark_workspace",
]
