"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from poetctl import __version__
from poetctl.cli.commands import config, create, deps, project, settings
from poetctl.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="poetctl",
    help="Drive Poetry projects from the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Arguments after the command are passed through to poetry untouched
_PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"poetctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress command output.",
        ),
    ] = False,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--directory",
            "-C",
            help="Operate on the project enclosing this directory.",
            exists=True,
            file_okay=False,
        ),
    ] = None,
) -> None:
    """poetctl - drive Poetry projects from the terminal.

    Commands run poetry in the root of the project enclosing the
    working directory. The full output of the last command is kept and
    can be printed again with 'poetctl output'.
    """
    configure_logging(verbose=verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["directory"] = directory


# Dependencies
app.command("add")(deps.add)
app.command("remove")(deps.remove)
app.command("deps")(deps.deps)

# Project
app.command("install")(project.install)
app.command("lock")(project.lock)
app.command("update")(project.update)
app.command("check")(project.check)
app.command("build")(project.build)
app.command("publish")(project.publish)
app.command("run", context_settings=_PASSTHROUGH)(project.run)
app.command("show")(project.show)
app.command("version")(project.version)
app.command("env")(project.env)
app.command("root")(project.root)

# Creation
app.command("init")(create.init)
app.command("new")(create.new)
app.command("search")(create.search)

# Configuration
app.add_typer(config.app, name="config")
app.add_typer(settings.app, name="settings")
app.command("output")(settings.output)


if __name__ == "__main__":
    app()
