"""Poetry configuration commands.

Reads and writes poetry's own configuration (``poetry config``), not
poetctl settings.
"""

import json
from typing import Annotated, Any

import typer
from rich.table import Table

from poetctl.cli.types import cli_errors, get_operator, show_output
from poetctl.core.configuration import (
    get_configuration,
    list_configuration,
    set_configuration,
)
from poetctl.utils.formatting import console, print_output, print_success

app = typer.Typer(
    help="Read and change poetry configuration.",
    no_args_is_help=True,
)


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


@app.command("get")
def get_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Configuration key, e.g. virtualenvs.in-project.")],
) -> None:
    """Print the value of a configuration key."""
    with cli_errors():
        value = get_configuration(key, get_operator(ctx).facade)
    print_output(_render_value(value))


@app.command("list")
def list_values(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON.")] = False,
) -> None:
    """List all configuration values."""
    with cli_errors():
        values = list_configuration(get_operator(ctx).facade)

    if as_json:
        console.print_json(json.dumps(values))
        return

    table = Table(show_header=True, header_style="bold_header", border_style="border")
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", style="muted")
    for key, value in sorted(values.items()):
        table.add_row(key, _render_value(value))
    console.print(table)


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Configuration key.")],
    value: Annotated[str | None, typer.Argument(help="New value.")] = None,
    local: Annotated[
        bool,
        typer.Option("--local", help="Write to the project's poetry.toml."),
    ] = False,
    unset: Annotated[bool, typer.Option("--unset", help="Remove the key.")] = False,
) -> None:
    """Set or unset a configuration key."""
    with cli_errors():
        operator = get_operator(ctx)
        set_configuration(key, value, operator.facade, local=local, unset=unset)
        show_output(ctx, operator)
    print_success(f"Unset {key}" if unset else f"Set {key} = {value}")
