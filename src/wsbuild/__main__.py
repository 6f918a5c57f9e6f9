"""Allow ``python -m wsbuild`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m wsbuild`` behaves identically to the ``wsbuild``
console script.
"""

from __future__ import annotations

from wsbuild.cli.app import cli

if __name__ == "__main__":
    cli()
