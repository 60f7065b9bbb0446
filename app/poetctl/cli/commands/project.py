"""Project commands.

Install, lock, update, check, build, publish, run and inspect the
project enclosing the working directory.
"""

from typing import Annotated

import typer
from rich.markup import escape

from poetctl.cli.types import (
    BuildFormat,
    VersionRule,
    cli_errors,
    get_operator,
    is_quiet,
    show_output,
)
from poetctl.core.project import get_project_name
from poetctl.utils.formatting import console, print_output, print_success


def install(
    ctx: typer.Context,
    no_dev: Annotated[
        bool,
        typer.Option("--no-dev", help="Skip development dependencies."),
    ] = False,
    extras: Annotated[
        list[str] | None,
        typer.Option("--extras", "-E", help="Extras to install."),
    ] = None,
) -> None:
    """Install the project's dependencies."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.install(no_dev=no_dev, extras=extras)
        show_output(ctx, operator)
    print_success("Dependencies installed")


def lock(
    ctx: typer.Context,
    no_update: Annotated[
        bool,
        typer.Option("--no-update", help="Do not update locked versions."),
    ] = False,
) -> None:
    """Lock dependencies without installing them."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.lock(no_update=no_update)
        show_output(ctx, operator)
    print_success("Lock file updated")


def update(
    ctx: typer.Context,
    packages: Annotated[
        list[str] | None,
        typer.Argument(help="Packages to update (default: all)."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would change."),
    ] = False,
) -> None:
    """Update dependencies within their constraints."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.update(packages, dry_run=dry_run)
        show_output(ctx, operator)


def check(ctx: typer.Context) -> None:
    """Validate pyproject.toml."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.check()
        show_output(ctx, operator)


def build(
    ctx: typer.Context,
    fmt: Annotated[
        BuildFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Build only this archive format.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Build source and wheel archives."""
    with cli_errors():
        operator = get_operator(ctx)
        operator.build(fmt.value if fmt else None)
        show_output(ctx, operator)
    print_success("Build finished")


def publish(
    ctx: typer.Context,
    repository: Annotated[
        str | None,
        typer.Option("--repository", "-r", help="Repository to publish to."),
    ] = None,
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Repository username."),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option(
            "--password",
            "-p",
            help="Repository password. Prompted for when --username is given without it.",
        ),
    ] = None,
    build_first: Annotated[
        bool,
        typer.Option("--build", help="Build the package before publishing."),
    ] = False,
) -> None:
    """Publish the package to a repository."""
    if username and password is None:
        password = typer.prompt("Password", hide_input=True)
    with cli_errors():
        operator = get_operator(ctx)
        operator.publish(
            repository=repository,
            username=username,
            password=password,
            build=build_first,
        )
        show_output(ctx, operator)
    print_success("Package published")


def run(
    ctx: typer.Context,
    command: Annotated[
        list[str],
        typer.Argument(help="Command and arguments to run in the virtualenv."),
    ],
) -> None:
    """Run a command inside the project's virtual environment.

    Examples:
        poetctl run pytest -q
        poetctl run -- python -m mypkg --flag
    """
    with cli_errors():
        operator = get_operator(ctx)
        operator.run(command)
        show_output(ctx, operator)


def show(
    ctx: typer.Context,
    package: Annotated[
        str | None,
        typer.Argument(help="Show details for a single package."),
    ] = None,
    tree: Annotated[bool, typer.Option("--tree", help="Show the dependency tree.")] = False,
    latest: Annotated[
        bool,
        typer.Option("--latest", "-l", help="Show the latest available versions."),
    ] = False,
) -> None:
    """Show installed packages."""
    with cli_errors():
        print_output(get_operator(ctx).show(package, tree=tree, latest=latest))


def version(
    ctx: typer.Context,
    rule: Annotated[
        VersionRule | None,
        typer.Argument(help="Bump rule; omit to print the current version."),
    ] = None,
) -> None:
    """Print or bump the project version."""
    with cli_errors():
        print_output(get_operator(ctx).version(rule.value if rule else None))


def env(ctx: typer.Context) -> None:
    """Print the path of the project's virtual environment."""
    with cli_errors():
        print_output(get_operator(ctx).env_path())


def root(ctx: typer.Context) -> None:
    """Print the project root directory.

    Exits with status 1 when not inside a Poetry project.
    """
    with cli_errors():
        operator = get_operator(ctx)
    if operator.root is None:
        if not is_quiet(ctx):
            console.print("[muted]Not inside a Poetry project.[/]")
        raise typer.Exit(code=1)
    name = get_project_name(operator.root)
    print_output(str(operator.root))
    if name and not is_quiet(ctx):
        console.print(f"[muted]project: {escape(name)}[/]")
