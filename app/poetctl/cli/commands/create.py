"""Project creation and package search commands.

These commands are available outside a Poetry project; ``init`` is only
available outside one.
"""

from typing import Annotated

import typer

from poetctl.cli.types import cli_errors, get_operator, show_output
from poetctl.utils.formatting import print_output, print_success


def init(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Package name (default: directory name)."),
    ] = None,
) -> None:
    """Create a pyproject.toml in the current directory."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.init(name=name)
        show_output(ctx, operator)
    print_success(f"Initialized Poetry project in {operator.directory}")


def new(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Directory to create the project in.")],
    name: Annotated[
        str | None,
        typer.Option("--name", help="Package name (default: directory name)."),
    ] = None,
    src: Annotated[
        bool,
        typer.Option("--src", help="Use the src layout."),
    ] = False,
) -> None:
    """Create a new project skeleton."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.new(path, name=name, src=src)
        show_output(ctx, operator)
    print_success(f"Created project at {path}")


def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search terms.")],
) -> None:
    """Search the package index."""
    with cli_errors():
        print_output(get_operator(ctx).search(query))
