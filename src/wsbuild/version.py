"""Version information for wsbuild."""

from __future__ import annotations

from importlib.metadata import version as _distribution_version

__version__: str = "0.1.0"


def get_version_title() -> str:
    """Return the installed distribution version, e.g. ``"wsbuild 0.1.0"``.

    Raises
    ------
    importlib.metadata.PackageNotFoundError
        When wsbuild is imported from a source tree that was never
        installed.
    """
    return f"wsbuild {_distribution_version('wsbuild')}"
