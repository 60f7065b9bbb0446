"""Unit tests for the last-output slot."""

from pathlib import Path

from poetctl.core.output import OutputLog
from poetctl.core.paths import get_output_log_path
from poetctl.core.runner import ExecutionResult


def _result(output: str) -> ExecutionResult:
    return ExecutionResult(("poetry", "lock"), 0, output)


class TestOutputLog:
    """Tests for OutputLog."""

    def test_default_path(self) -> None:
        """The log lives in the state directory by default."""
        assert OutputLog().path == get_output_log_path()

    def test_write_and_read(self, tmp_path: Path) -> None:
        """Written output can be read back."""
        log = OutputLog(tmp_path / "nested" / "last.log")

        location = log.write(_result("$ poetry lock\nok\n"))

        assert location == tmp_path / "nested" / "last.log"
        assert log.read() == "$ poetry lock\nok\n"

    def test_read_without_output(self, tmp_path: Path) -> None:
        """read returns None when nothing was recorded."""
        assert OutputLog(tmp_path / "missing.log").read() is None

    def test_write_failure_returns_none(self, tmp_path: Path) -> None:
        """An unwritable location yields None instead of raising."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        assert OutputLog(blocker / "last.log").write(_result("x")) is None
