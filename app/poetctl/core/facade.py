"""Single entry point for running poetry commands.

Every higher-level operation reaches the poetry executable through
:class:`CommandFacade`, which turns a failed or unstartable process into
a :class:`~poetctl.core.errors.CommandError`.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from poetctl.core.errors import CommandError
from poetctl.core.output import OutputLog
from poetctl.core.runner import ExecutionResult, ProcessRunner, SyncProcessRunner
from poetctl.utils.shell import format_command

if TYPE_CHECKING:
    from poetctl.core.settings import Settings

logger = logging.getLogger(__name__)

# Exit statuses reported when no process status is available
EXIT_TIMEOUT = 124
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127

DEFAULT_EXECUTABLE = "poetry"


class CommandFacade:
    """Builds poetry invocations and checks their outcome.

    Attributes:
        runner: Runner used to execute commands.
        executable: Poetry executable name or path.
        output_log: Slot receiving each command's output, or None to skip it.
        last_result: Result of the most recent command, overwritten per call.

    Example:
        >>> facade = CommandFacade(SyncProcessRunner(cwd="/path/to/project"))
        >>> facade.execute("add", ["requests"])
        True
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        executable: str = DEFAULT_EXECUTABLE,
        output_log: OutputLog | None = None,
    ) -> None:
        self.runner = runner or SyncProcessRunner()
        self.executable = executable
        self.output_log = output_log
        self.last_result: ExecutionResult | None = None

    @classmethod
    def from_settings(cls, settings: Settings, cwd: Path | None = None) -> CommandFacade:
        """Create a facade configured from user settings.

        Args:
            settings: Loaded settings.
            cwd: Working directory for commands (usually the project root).
        """
        runner = SyncProcessRunner(
            cwd=str(cwd) if cwd is not None else None,
            timeout=settings.timeout_seconds,
            max_output_chars=settings.max_output_chars,
        )
        output_log = OutputLog() if settings.keep_output_log else None
        return cls(runner, executable=settings.executable, output_log=output_log)

    def execute(self, command: str, args: list[str] | None = None) -> bool:
        """Run a poetry command and require it to succeed.

        Args:
            command: Poetry subcommand (e.g. "add").
            args: Arguments following the subcommand.

        Returns:
            True when the command exits with status 0.

        Raises:
            CommandError: If the command exits non-zero or cannot be started.
        """
        self._run(command, list(args or []))
        return True

    def query(self, command: str, args: list[str] | None = None) -> str:
        """Run a read-only poetry command and return its output.

        The output is read from the result of this very invocation, without
        the header line.

        Raises:
            CommandError: If the command exits non-zero or cannot be started.
        """
        return self._run(command, list(args or [])).body

    def _run(self, command: str, args: list[str]) -> ExecutionResult:
        argv = [self.executable, command, *args]
        typed = format_command(argv)
        logger.info("Executing %s", typed)

        message: str | None = None
        cause: Exception | None = None
        try:
            result = self.runner.run(self.executable, command, args)
        except FileNotFoundError as e:
            message = f"Executable not found: {self.executable}"
            cause = e
            result = _unfinished(argv, EXIT_NOT_FOUND, f"{e}\n")
        except subprocess.TimeoutExpired as e:
            message = f"'{typed}' timed out after {e.timeout} seconds"
            cause = e
            result = _unfinished(argv, EXIT_TIMEOUT, f"{_partial_output(e.output)}[{message}]\n")
        except OSError as e:
            message = f"Cannot execute {self.executable}: {e}"
            cause = e
            result = _unfinished(argv, EXIT_CANNOT_EXECUTE, f"{e}\n")

        self.last_result = result
        location = self.output_log.write(result) if self.output_log is not None else None

        if not result.success:
            # Reported to the user by the caller; kept here for --verbose runs
            if location is not None:
                logger.info(
                    "'%s' exited with status %d, see %s for the full output",
                    typed,
                    result.exit_status,
                    location,
                )
            else:
                logger.info("'%s' exited with status %d", typed, result.exit_status)
            raise CommandError(
                command,
                args,
                result.exit_status,
                output_location=location,
                output=result.output,
                message=message,
            ) from cause

        return result


def _unfinished(argv: list[str], exit_status: int, body: str) -> ExecutionResult:
    """Result for a command that could not start or did not finish."""
    return ExecutionResult(
        command=tuple(argv),
        exit_status=exit_status,
        output=f"$ {format_command(argv)}\n{body}",
    )


def _partial_output(output: str | bytes | None) -> str:
    """Output captured before a timeout, newline-terminated if non-empty."""
    if not output:
        return ""
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output if output.endswith("\n") else f"{output}\n"
