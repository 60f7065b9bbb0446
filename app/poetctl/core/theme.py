"""Console colors for poetctl.

Any color can be overridden in ``~/.config/poetctl/theme.toml``::

    [colors]
    dependency = "#8be9fd"
    optional = "#f1fa8c"

A missing, unreadable or invalid theme file falls back to the defaults.
"""

import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from poetctl.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$", description="Hex color, #RGB or #RRGGBB"),
]


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for the styles poetctl renders."""

    model_config = ConfigDict(extra="forbid")

    # Tables
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"
    dependency: HexColor = "#69B9A1"
    optional: HexColor = "#faf870"

    # Status messages
    info: HexColor = "#0ec1c8"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"

    def styles(self) -> dict[str, str]:
        """Rich style definitions keyed by the names used in markup."""
        return {
            "bold_header": f"bold {self.header}",
            "border": self.border,
            "muted": self.muted,
            "dependency": f"bold {self.dependency}",
            "optional": self.optional,
            "info": self.info,
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
        }


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors from ``path`` (default: the user theme file)."""
    theme_path = path or get_theme_path()
    try:
        with open(theme_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()

    try:
        return ThemeColors.model_validate(data.get("colors", {}))
    except ValidationError as e:
        logger.warning("Ignoring invalid colors in %s: %s", theme_path, e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich theme from ``colors`` (loaded from the theme file if None)."""
    return Theme((colors or load_theme()).styles())


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme shared by the console instances, loaded once per process."""
    return get_rich_theme()
