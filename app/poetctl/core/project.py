"""Poetry project discovery.

The project root is the nearest ancestor directory holding a
``pyproject.toml`` that declares a ``[tool.poetry]`` table. Only the
nearest manifest is considered: if it lacks the marker, the search stops
there rather than continuing to a manifest further up.
"""

import logging
import re
from pathlib import Path

from poetctl.core.errors import ProjectExistsError, ProjectNotFoundError
from poetctl.core.scanner import get_value

logger = logging.getLogger(__name__)

MANIFEST_NAME = "pyproject.toml"
PROJECT_SECTION = "tool.poetry"

_PROJECT_MARKER = re.compile(r"^\[tool\.poetry\][ \t\r]*(?:#.*)?$", re.MULTILINE)


def find_manifest(start: Path | None = None) -> Path | None:
    """Find the nearest pyproject.toml at or above ``start``.

    Args:
        start: Directory (or file) to start from. Defaults to the current
            working directory.

    Returns:
        Path to the manifest, or None if no ancestor has one.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent

    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def is_poetry_manifest(document: str) -> bool:
    """Check whether manifest text declares a ``[tool.poetry]`` table."""
    return _PROJECT_MARKER.search(document) is not None


def find_project_root(start: Path | None = None) -> Path | None:
    """Locate the root directory of the enclosing Poetry project.

    Args:
        start: Directory to start from. Defaults to the current working
            directory.

    Returns:
        Absolute path of the project root, or None when not inside a
        Poetry project.
    """
    manifest = find_manifest(start)
    if manifest is None:
        logger.debug("No %s found above %s", MANIFEST_NAME, start or Path.cwd())
        return None

    if not is_poetry_manifest(manifest.read_text(encoding="utf-8")):
        logger.debug("%s has no [%s] table", manifest, PROJECT_SECTION)
        return None
    return manifest.parent


def require_project_root(start: Path | None = None) -> Path:
    """Locate the project root or raise.

    Raises:
        ProjectNotFoundError: If not inside a Poetry project.
    """
    root = find_project_root(start)
    if root is None:
        raise ProjectNotFoundError(
            f"Not inside a Poetry project: {(start or Path.cwd()).resolve()}",
            hint="Run 'poetctl init' to create one here, or 'poetctl new <path>'.",
        )
    return root


def require_no_project(start: Path | None = None) -> None:
    """Ensure ``start`` is not inside a Poetry project.

    Raises:
        ProjectExistsError: If a project root encloses ``start``.
    """
    root = find_project_root(start)
    if root is not None:
        raise ProjectExistsError(f"Already inside a Poetry project: {root}")


def get_manifest_path(root: Path) -> Path:
    """Return the manifest path of a project root."""
    return root / MANIFEST_NAME


def get_project_name(root: Path) -> str | None:
    """Read ``name`` from the ``[tool.poetry]`` table."""
    document = get_manifest_path(root).read_text(encoding="utf-8")
    return get_value(document, PROJECT_SECTION, "name")


def get_project_version(root: Path) -> str | None:
    """Read ``version`` from the ``[tool.poetry]`` table."""
    document = get_manifest_path(root).read_text(encoding="utf-8")
    return get_value(document, PROJECT_SECTION, "version")
