"""Infrastructure: workspace and module marker detection.

Rules
-----
* A tracked workspace is a directory containing a ``.wsbuild`` directory.
* A module directory sits directly inside a tracked workspace and holds
  either ``module.yaml`` or a legacy ``.wsbuild-spec`` file.
* Detection only; nothing here creates or modifies markers except
  :func:`mark_workspace`.
"""

from __future__ import annotations

from pathlib import Path

from wsbuild.core.workspace import MODULE_SPEC_FILE

WORKSPACE_MARKER: str = ".wsbuild"
LEGACY_MODULE_SPEC_FILE: str = ".wsbuild-spec"


class FilesystemWorkspaceHelper:
    """:class:`~wsbuild.core.protocols.WorkspaceHelper` backed by marker files."""

    def is_tracked_workspace(self, path: Path) -> bool:
        return (path / WORKSPACE_MARKER).is_dir()

    def is_module_directory(self, path: Path) -> bool:
        if path.parent == path or not self.is_tracked_workspace(path.parent):
            return False
        return (
            (path / MODULE_SPEC_FILE).is_file()
            or (path / LEGACY_MODULE_SPEC_FILE).is_file()
        )

    def find_enclosing_module_directory(self, path: Path) -> Path | None:
        resolved = path.resolve()
        for candidate in (resolved, *resolved.parents):
            if self.is_module_directory(candidate):
                return candidate
        return None

    def module_spec_exists(self, path: Path) -> bool:
        return (path / MODULE_SPEC_FILE).is_file()


def mark_workspace(path: Path) -> bool:
    """Mark *path* as a tracked workspace.

    Returns ``False`` when it already was one.
    """
    marker = path / WORKSPACE_MARKER
    if marker.is_dir():
        return False
    marker.mkdir(parents=True)
    return True
