"""CLI package for poetctl.

This package contains the Typer application and all subcommands.
"""

from poetctl.cli.main import app

__all__ = ["app"]
