"""Line-oriented scanning of pyproject.toml sections.

This is deliberately not a TOML parser: it finds a bracketed section
header and picks ``key = "value"`` / ``key = {blob}`` lines out of it,
skipping anything it does not recognize. That keeps it working on
documents a strict parser would reject.
"""

import re
from dataclasses import dataclass

# key = "value"  or  key = {inline table}, optional trailing comment
ENTRY_PATTERN = re.compile(
    r"""^\s*(?P<key>[^\s=\#]+)\s*=\s*
        (?:"(?P<quoted>[^"]*)"|\{(?P<braced>.*?)\})
        \s*(?:\#.*)?$""",
    re.VERBOSE,
)

# Any line starting a top-level table or array of tables
_HEADER_START = re.compile(r"^\[", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class SectionSpan:
    """Character range of one section's body within a document.

    Attributes:
        start: Offset just past the header line.
        end: Offset of the next header line, or the document length.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span bounds."""
        if self.start < 0:
            msg = f"Span start must not be negative, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end {self.end} is before start {self.start}"
            raise ValueError(msg)


def _header_pattern(section: str) -> re.Pattern[str]:
    return re.compile(
        rf"^\[[ \t]*{re.escape(section)}[ \t]*\][ \t\r]*(?:#[^\n]*)?$",
        re.MULTILINE,
    )


def find_section(document: str, section: str) -> SectionSpan | None:
    """Locate the body of the ``[section]`` table.

    Args:
        document: Full manifest text.
        section: Dotted table name, e.g. "tool.poetry.dependencies".

    Returns:
        SectionSpan of the section body, or None if the header is absent.
    """
    header = _header_pattern(section).search(document)
    if header is None:
        return None

    start = header.end()
    if start < len(document) and document[start] == "\n":
        start += 1

    next_header = _HEADER_START.search(document, start)
    end = next_header.start() if next_header is not None else len(document)
    return SectionSpan(start=start, end=end)


def extract_entries(
    document: str,
    span: SectionSpan,
    pattern: re.Pattern[str] = ENTRY_PATTERN,
) -> list[tuple[str, str]]:
    """Collect key/value pairs from the lines inside ``span``.

    Args:
        document: Full manifest text.
        span: Section body as returned by :func:`find_section`.
        pattern: Line pattern with a ``key`` group and a ``quoted`` or
            ``braced`` value group.

    Returns:
        List of (key, raw value text) tuples in document order. Lines that
        don't match are skipped.
    """
    entries: list[tuple[str, str]] = []
    for line in document[span.start : span.end].splitlines():
        match = pattern.match(line)
        if match is None:
            continue
        groups = match.groupdict()
        value = groups.get("quoted")
        if value is None:
            value = groups.get("braced") or ""
        entries.append((match.group("key"), value.strip()))
    return entries


def get_value(document: str, section: str, key: str) -> str | None:
    """Return the raw value of ``key`` inside ``[section]``, if present."""
    span = find_section(document, section)
    if span is None:
        return None
    for entry_key, value in extract_entries(document, span):
        if entry_key == key:
            return value
    return None
