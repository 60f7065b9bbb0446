"""Unit tests for init, new and search commands."""

from pathlib import Path
from unittest.mock import MagicMock

from poetctl.cli.main import app
from poetctl.utils.shell import CommandResult
from typer.testing import CliRunner

runner = CliRunner()


class TestInitCommand:
    """Tests for poetctl init."""

    def test_init_outside_project(self, tmp_path: Path, mock_run: MagicMock) -> None:
        """init runs non-interactively in the directory."""
        target = tmp_path / "fresh"
        target.mkdir()

        result = runner.invoke(app, ["-C", str(target), "init", "--name", "fresh"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            ["poetry", "init", "--no-interaction", "--name", "fresh"],
            cwd=str(target.resolve()),
            timeout=None,
            max_output_chars=1_000_000,
        )
        assert "Initialized Poetry project" in result.output

    def test_init_inside_project(self, project: Path, mock_run: MagicMock) -> None:
        """init refuses to overwrite an existing project."""
        result = runner.invoke(app, ["-C", str(project), "init"])

        assert result.exit_code == 1
        assert "Error" in result.output
        mock_run.assert_not_called()


class TestNewCommand:
    """Tests for poetctl new."""

    def test_new_src_layout(self, tmp_path: Path, mock_run: MagicMock) -> None:
        """new passes --src and the target path."""
        result = runner.invoke(app, ["-C", str(tmp_path), "new", "--src", "my-app"])

        assert result.exit_code == 0
        assert mock_run.call_args.args[0] == ["poetry", "new", "--src", "my-app"]
        assert "Created project at my-app" in result.output


class TestSearchCommand:
    """Tests for poetctl search."""

    def test_search_prints_results(self, tmp_path: Path, mock_run: MagicMock) -> None:
        """search prints the index results."""
        mock_run.return_value = CommandResult(
            output="requests (2.31.0)\n Python HTTP for Humans.\n", returncode=0
        )

        result = runner.invoke(app, ["-C", str(tmp_path), "search", "requests"])

        assert result.exit_code == 0
        assert "requests (2.31.0)" in result.output
