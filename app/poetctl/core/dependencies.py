"""Dependency listing from pyproject.toml.

Entries are read with the line scanner in :mod:`poetctl.core.scanner`, so
a manifest with unrelated syntax errors still yields its dependencies.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from poetctl.core.errors import NoDependenciesError
from poetctl.core.scanner import extract_entries, find_section

logger = logging.getLogger(__name__)

DEPENDENCIES_SECTION = "tool.poetry.dependencies"
DEV_DEPENDENCIES_SECTION = "tool.poetry.dev-dependencies"
# Poetry >= 1.2 declares development dependencies as a group
DEV_GROUP_SECTION = "tool.poetry.group.dev.dependencies"

_OPTIONAL_MARKER = re.compile(r"\boptional\s*=\s*true\b")
# The marker together with the comma separating it from its neighbours
_OPTIONAL_STRIP = re.compile(r"\s*,?\s*\boptional\s*=\s*true\b\s*,?\s*")
_NAME_SEPARATORS = re.compile(r"[-_.]+")


@dataclass(frozen=True, slots=True)
class DependencyEntry:
    """A dependency declared in the manifest.

    Attributes:
        name: Package name as written in the manifest.
        attributes: Raw constraint text: the version string, or the inner
            text of an inline table.
        optional: True if the entry is declared with ``optional = true``.
    """

    name: str
    attributes: str
    optional: bool = False

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Dependency name cannot be empty"
            raise ValueError(msg)
        if "=" in self.name or any(c.isspace() for c in self.name):
            msg = f"Invalid dependency name: {self.name!r}"
            raise ValueError(msg)

    @property
    def display(self) -> str:
        """Name and constraint, e.g. ``requests (^2.31)``."""
        if not self.attributes:
            return self.name
        return f"{self.name} ({self.attributes})"


def is_optional(attributes: str) -> bool:
    """Check whether an attribute blob carries ``optional = true``."""
    return _OPTIONAL_MARKER.search(attributes) is not None


def canonical_name(name: str) -> str:
    """Normalize a package name the way Poetry compares names (PEP 503)."""
    return _NAME_SEPARATORS.sub("-", name).lower()


def strip_optional(attributes: str) -> str:
    """Remove the ``optional = true`` marker from an attribute blob."""
    return _OPTIONAL_STRIP.sub(", ", attributes).strip(" ,")


def _candidate_sections(dev: bool) -> list[str]:
    # Development dependencies may sit in both tables while a manifest is migrated
    if dev:
        return [DEV_DEPENDENCIES_SECTION, DEV_GROUP_SECTION]
    return [DEPENDENCIES_SECTION]


def parse_dependencies(
    document: str,
    dev: bool = False,
    optional: bool = False,
) -> list[DependencyEntry]:
    """Extract dependency entries from manifest text.

    Args:
        document: Manifest contents.
        dev: Read development dependencies instead of main dependencies.
        optional: Return only optional entries (marker stripped from their
            attributes) instead of only non-optional ones.

    Returns:
        Matching entries in document order. With ``dev``, entries of the
        legacy table come before those of the dev group. Empty if the
        sections are empty.

    Raises:
        NoDependenciesError: If no matching section is present.
    """
    candidates = _candidate_sections(dev)
    spans = [
        span
        for span in (find_section(document, section) for section in candidates)
        if span is not None
    ]
    if not spans:
        kind = "development dependencies" if dev else "dependencies"
        expected = " or ".join(f"[{section}]" for section in candidates)
        raise NoDependenciesError(
            f"No {kind} declared",
            hint=f"The manifest has no {expected} section.",
        )

    entries: list[DependencyEntry] = []
    for span in spans:
        for name, attributes in extract_entries(document, span):
            flagged = is_optional(attributes)
            if flagged != optional:
                continue
            try:
                entries.append(
                    DependencyEntry(
                        name=name,
                        attributes=strip_optional(attributes) if flagged else attributes,
                        optional=flagged,
                    )
                )
            except ValueError:
                logger.debug("Skipping dependency with invalid name: %r", name)
    return entries


def list_dependencies(
    manifest_path: Path,
    dev: bool = False,
    optional: bool = False,
) -> list[DependencyEntry]:
    """List dependencies declared in a manifest file.

    The file is read on every call.

    Args:
        manifest_path: Path to pyproject.toml.
        dev: Read development dependencies instead of main dependencies.
        optional: Select optional entries instead of non-optional ones.

    Returns:
        Matching DependencyEntry objects.

    Raises:
        NoDependenciesError: If the section is absent.
        OSError: If the manifest cannot be read.
    """
    document = manifest_path.read_text(encoding="utf-8")
    return parse_dependencies(document, dev=dev, optional=optional)
