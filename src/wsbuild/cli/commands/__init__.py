"""Built-in wsbuild commands.

Each command is a plain class satisfying
:class:`~wsbuild.core.protocols.Command`; it carries its own
:class:`~wsbuild.core.models.CommandSettings` and is run through
:class:`~wsbuild.cli.runner.CommandRunner`.
"""
