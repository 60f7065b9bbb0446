"""Dependency commands: add, remove and deps.

``deps`` reads pyproject.toml directly; ``add`` and ``remove`` go through
poetry so the lock file stays in sync.
"""

import json
from typing import Annotated

import typer

from poetctl.cli.types import cli_errors, get_operator, show_output
from poetctl.utils.formatting import (
    console,
    create_dependency_table,
    format_dependency_row,
    print_info,
    print_success,
)


def add(
    ctx: typer.Context,
    packages: Annotated[
        list[str],
        typer.Argument(help="Packages to add, e.g. 'requests' or 'httpx@^0.27'."),
    ],
    dev: Annotated[
        bool,
        typer.Option("--dev", "-D", help="Add to the development dependencies."),
    ] = False,
    optional: Annotated[
        bool,
        typer.Option("--optional", help="Declare the packages as optional."),
    ] = False,
    extras: Annotated[
        list[str] | None,
        typer.Option("--extras", "-E", help="Extras to enable for the packages."),
    ] = None,
) -> None:
    """Add packages to the project.

    Examples:
        poetctl add requests
        poetctl add --dev pytest ruff
        poetctl add --optional psycopg -E binary
    """
    with cli_errors():
        operator = get_operator(ctx)
        operator.add(packages, dev=dev, optional=optional, extras=extras)
        show_output(ctx, operator)
    print_success(f"Added {', '.join(packages)}")


def remove(
    ctx: typer.Context,
    package: Annotated[str, typer.Argument(help="Declared package to remove.")],
    dev: Annotated[
        bool,
        typer.Option("--dev", "-D", help="Remove from the development dependencies."),
    ] = False,
) -> None:
    """Remove a declared package from the project."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.remove(package, dev=dev)
        show_output(ctx, operator)
    print_success(f"Removed {package}")


def deps(
    ctx: typer.Context,
    dev: Annotated[
        bool,
        typer.Option("--dev", "-D", help="List development dependencies."),
    ] = False,
    optional: Annotated[
        bool,
        typer.Option("--optional", help="List optional dependencies only."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print as JSON."),
    ] = False,
) -> None:
    """List dependencies declared in pyproject.toml."""
    with cli_errors():
        entries = get_operator(ctx).dependencies(dev=dev, optional=optional)

    if as_json:
        payload = [
            {"name": e.name, "attributes": e.attributes, "optional": e.optional}
            for e in entries
        ]
        console.print_json(json.dumps(payload))
        return

    if not entries:
        print_info("No matching dependencies declared.")
        return

    title = "Development Dependencies" if dev else "Dependencies"
    if optional:
        title = f"Optional {title}"
    table = create_dependency_table(title)
    for entry in entries:
        table.add_row(*format_dependency_row(entry))
    console.print(table)
