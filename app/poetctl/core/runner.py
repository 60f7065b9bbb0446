"""Process runners for poetry commands.

A runner executes ``<executable> <subcommand> [args...]`` and returns the
exit status together with the captured output. Runners never raise for a
non-zero exit status; interpreting the status is the facade's job.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from poetctl.utils.shell import format_command, run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Exit status and captured output of one command invocation.

    Attributes:
        command: Full argument vector that was executed.
        exit_status: Exit code of the process.
        output: Header line followed by interleaved stdout/stderr.
        truncated: True if the beginning of the process output was dropped.
    """

    command: tuple[str, ...]
    exit_status: int
    output: str
    truncated: bool = False

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0."""
        return self.exit_status == 0

    @property
    def header(self) -> str:
        """The command line as typed, as written at the top of the output."""
        return f"$ {format_command(list(self.command))}"

    @property
    def body(self) -> str:
        """Process output without the header line."""
        _, _, body = self.output.partition("\n")
        return body


class ProcessRunner(ABC):
    """Abstract base class for command runners.

    Example:
        >>> runner = SyncProcessRunner(cwd="/path/to/project")
        >>> result = runner.run("poetry", "lock", ["--no-update"])
        >>> result.success
        True
    """

    @abstractmethod
    def run(self, executable: str, subcommand: str, args: list[str]) -> ExecutionResult:
        """Execute a command and capture its output.

        Args:
            executable: Program to run (e.g. "poetry").
            subcommand: First argument after the executable.
            args: Remaining arguments, passed as separate vector elements.

        Returns:
            ExecutionResult for the finished process.

        Raises:
            FileNotFoundError: If the executable is not found.
            OSError: If the process cannot be started.
            subprocess.TimeoutExpired: If the runner enforces a timeout.
        """


class SyncProcessRunner(ProcessRunner):
    """Runs commands synchronously, blocking until they exit.

    Attributes:
        cwd: Working directory for executed commands.
        timeout: Seconds before a command is killed. None waits forever.
        max_output_chars: Upper bound on retained process output.
    """

    def __init__(
        self,
        cwd: str | None = None,
        timeout: float | None = None,
        max_output_chars: int | None = None,
    ) -> None:
        self.cwd = cwd
        self.timeout = timeout
        self.max_output_chars = max_output_chars

    def run(self, executable: str, subcommand: str, args: list[str]) -> ExecutionResult:
        """Execute the command and return its exit status and output."""
        argv = [executable, subcommand, *args]
        header = f"$ {format_command(argv)}"

        logger.debug("Running %s (cwd=%s)", header, self.cwd)
        result = run_command(
            argv,
            cwd=self.cwd,
            timeout=self.timeout,
            max_output_chars=self.max_output_chars,
        )

        return ExecutionResult(
            command=tuple(argv),
            exit_status=result.returncode,
            output=f"{header}\n{result.output}",
            truncated=result.truncated,
        )
