"""wsbuild — workspace-oriented build and dependency tool.

Every command runs through a shared execution envelope that resolves the
workspace, bootstraps logging and maps failures onto exit codes.
"""

import logging

from wsbuild.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["__version__"]
