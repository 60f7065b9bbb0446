"""CLI commands for poetctl.

This package contains all subcommand implementations.
"""

from poetctl.cli.commands import config, create, deps, project, settings

__all__ = ["config", "create", "deps", "project", "settings"]
