"""Fixtures for CLI tests."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from poetctl.utils.shell import CommandResult


@pytest.fixture
def mock_run() -> Iterator[MagicMock]:
    """Patch the process layer; commands succeed with no output by default."""
    with patch("poetctl.core.runner.run_command") as mock:
        mock.return_value = CommandResult(output="", returncode=0)
        yield mock
