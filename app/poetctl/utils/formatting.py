"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from poetctl.core.theme import get_theme

if TYPE_CHECKING:
    from poetctl.core.dependencies import DependencyEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route poetctl log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured ``poetctl`` logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("poetctl")
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=verbose, markup=False)
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def create_dependency_table(title: str = "Dependencies") -> Table:
    """Create a pre-configured table for displaying dependencies.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for dependency display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Constraint", style="muted")
    table.add_column("", width=8, justify="center")
    return table


def format_dependency_row(entry: DependencyEntry) -> tuple[str, str, str]:
    """Format a dependency as a table row with Rich markup."""
    flag = "[optional]optional[/]" if entry.optional else ""
    return (
        f"[dependency]{escape(entry.name)}[/]",
        f"[muted]{escape(entry.attributes)}[/]",
        flag,
    )


def print_output(text: str) -> None:
    """Print captured command output verbatim (no markup interpretation)."""
    console.print(
        text,
        markup=False,
        highlight=False,
        soft_wrap=True,
        end="" if text.endswith("\n") else "\n",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
