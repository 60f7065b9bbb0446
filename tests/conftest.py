"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

SAMPLE_PYPROJECT = """\
[tool.poetry]
name = "demo-app"
version = "0.4.1"
description = "Demo project"

[tool.poetry.dependencies]
python = "^3.11"
requests = "^2.31"
psycopg = {version = "^3.1", optional = true, extras = ["binary"]}
rich = {version = "^13.7"}

[tool.poetry.dev-dependencies]
pytest = "^8.0"
ruff = {version = "^0.4", optional = true}

[tool.poetry.extras]
pg = ["psycopg"]

[build-system]
requires = ["poetry-core"]
build-backend = "poetry.core.masonry.api"
"""


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings and output logs out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg-state"))
    monkeypatch.delenv("POETCTL_EXECUTABLE", raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo CLI logging configuration so caplog sees poetctl records."""
    yield
    logger = logging.getLogger("poetctl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_pyproject() -> str:
    """Sample Poetry manifest for testing."""
    return SAMPLE_PYPROJECT


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a pyproject.toml into a directory under tmp_path."""

    def _make(content: str = SAMPLE_PYPROJECT, relative: str = "project") -> Path:
        root = tmp_path / relative
        root.mkdir(parents=True, exist_ok=True)
        (root / "pyproject.toml").write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def project(make_project: Callable[..., Path]) -> Path:
    """A Poetry project built from the sample manifest."""
    return make_project()
