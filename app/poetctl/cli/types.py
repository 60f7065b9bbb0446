"""Shared helpers for CLI commands.

This module provides the operator factory and error boundary used across
the command modules to avoid code duplication.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

import typer

from poetctl.core.errors import CommandError, PoetctlError
from poetctl.core.operations import ProjectOperator
from poetctl.core.settings import load_settings
from poetctl.utils.formatting import print_error, print_info, print_output


class BuildFormat(str, Enum):
    """Archive formats accepted by ``poetctl build``."""

    WHEEL = "wheel"
    SDIST = "sdist"


class VersionRule(str, Enum):
    """Bump rules accepted by ``poetctl version``."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    PREPATCH = "prepatch"
    PREMINOR = "preminor"
    PREMAJOR = "premajor"
    PRERELEASE = "prerelease"


def is_quiet(ctx: typer.Context) -> bool:
    """Check if --quiet was passed to the main command."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("quiet", False))


def get_directory(ctx: typer.Context) -> Path:
    """Directory the user asked to operate on (--directory or the cwd)."""
    obj = ctx.find_root().obj or {}
    return obj.get("directory") or Path.cwd()


def get_operator(ctx: typer.Context) -> ProjectOperator:
    """Create a ProjectOperator for the selected directory.

    Raises:
        SettingsError: If the settings file is invalid.
    """
    return ProjectOperator.for_directory(get_directory(ctx), load_settings())


def show_output(ctx: typer.Context, operator: ProjectOperator) -> None:
    """Print the output of the operator's last command unless --quiet."""
    result = operator.facade.last_result
    if result is not None and not is_quiet(ctx):
        print_output(result.output)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Render poetctl errors and exit with status 1.

    Failed commands have their captured output printed before the error
    so the user sees what poetry reported.
    """
    try:
        yield
    except CommandError as e:
        if e.output:
            print_output(e.output)
        print_error(str(e))
        if e.hint:
            print_info(e.hint)
        raise typer.Exit(code=1) from e
    except PoetctlError as e:
        print_error(str(e))
        if e.hint:
            print_info(e.hint)
        raise typer.Exit(code=1) from e
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
