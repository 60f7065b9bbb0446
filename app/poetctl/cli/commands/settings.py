"""poetctl settings and last-output commands."""

from typing import Annotated

import typer
from rich.markup import escape

from poetctl.cli.types import cli_errors
from poetctl.core.output import OutputLog
from poetctl.core.paths import get_settings_path
from poetctl.core.settings import Settings, load_settings, save_settings
from poetctl.utils.formatting import (
    console,
    print_error,
    print_info,
    print_output,
    print_success,
    print_warning,
)
from poetctl.utils.shell import command_exists

app = typer.Typer(
    help="Show or create poetctl settings.",
    no_args_is_help=True,
)


@app.command("show")
def show_settings() -> None:
    """Print the effective settings."""
    with cli_errors():
        settings = load_settings()
    console.print(f"[muted]{escape(str(get_settings_path()))}[/]")
    for key, value in settings.model_dump().items():
        console.print(f"  {key} = {value!r}", markup=False)
    if not command_exists(settings.executable):
        print_warning(f"'{settings.executable}' was not found on PATH")


@app.command("init")
def init_settings(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = get_settings_path()
    if path.exists() and not force:
        print_error(f"Settings already exist: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    with cli_errors():
        saved = save_settings(Settings(), path)
    print_success(f"Settings written: {saved}")


def output() -> None:
    """Print the full output of the last poetry command."""
    text = OutputLog().read()
    if text is None:
        print_info("No command output recorded yet.")
        raise typer.Exit(code=1)
    print_output(text)
