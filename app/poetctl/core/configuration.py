"""Reading and writing poetry configuration values.

``poetry config`` prints values in whatever form poetry's own repr
produces: JSON-ish literals, Python dict reprs with single quotes, or
plain text. Values are interpreted as JSON where possible and returned
as trimmed text otherwise.
"""

import json
import logging
import re
from typing import Any

from poetctl.core.facade import CommandFacade

logger = logging.getLogger(__name__)

_PYTHON_LITERALS = {"True": "true", "False": "false", "None": "null"}
_PYTHON_LITERAL = re.compile(r"\b(True|False|None)\b")
_LIST_LINE = re.compile(r"^(?P<key>[^\s=]+)\s*=\s*(?P<value>.*)$")


def parse_config_value(text: str) -> Any:
    """Interpret poetry config output as structured data.

    Args:
        text: Raw command output.

    Returns:
        The decoded JSON value, or the trimmed text if it is not JSON even
        after quote and literal normalization.
    """
    raw = text.strip()
    try:
        return json.loads(raw)
    except ValueError:
        pass

    normalized = _PYTHON_LITERAL.sub(lambda m: _PYTHON_LITERALS[m.group(1)], raw.replace("'", '"'))
    try:
        return json.loads(normalized)
    except ValueError:
        logger.debug("Config output is not structured, returning text: %r", raw[:100])
        return raw


def get_configuration(key: str, facade: CommandFacade) -> Any:
    """Return the value of a poetry configuration key.

    Args:
        key: Configuration key, e.g. "virtualenvs.in-project".
        facade: Facade used to run ``poetry config``.

    Raises:
        CommandError: If poetry rejects the key.
    """
    return parse_config_value(facade.query("config", [key]))


def list_configuration(facade: CommandFacade) -> dict[str, Any]:
    """Return all poetry configuration values as a mapping.

    Lines of ``poetry config --list`` that are not ``key = value`` are
    ignored.
    """
    values: dict[str, Any] = {}
    for line in facade.query("config", ["--list"]).splitlines():
        match = _LIST_LINE.match(line.strip())
        if match is None:
            continue
        values[match.group("key")] = parse_config_value(match.group("value"))
    return values


def set_configuration(
    key: str,
    value: str | None,
    facade: CommandFacade,
    *,
    local: bool = False,
    unset: bool = False,
) -> bool:
    """Set or unset a poetry configuration key.

    Args:
        key: Configuration key.
        value: New value. Ignored when ``unset`` is True.
        facade: Facade used to run ``poetry config``.
        local: Write to the project-local poetry.toml.
        unset: Remove the key instead of setting it.

    Raises:
        ValueError: If neither a value nor ``unset`` is given.
        CommandError: If poetry rejects the change.
    """
    args: list[str] = ["--local"] if local else []
    if unset:
        args.extend(["--unset", key])
    elif value is None:
        msg = f"No value given for configuration key '{key}'"
        raise ValueError(msg)
    else:
        args.extend([key, value])
    return facade.execute("config", args)
