"""Shell execution utilities.

Provides subprocess execution with combined output capture. Commands are
always executed as an argument vector, never through a shell.
"""

import shlex
import shutil
import subprocess
from dataclasses import dataclass

# Options whose value is masked when a command line is displayed
SECRET_OPTIONS = frozenset({"--password", "-p"})
REDACTED = "********"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        output: Standard output and standard error, interleaved.
        returncode: Exit code of the command.
        truncated: True if the beginning of the output was dropped.
    """

    output: str
    returncode: int
    truncated: bool = False

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    cwd: str | None = None,
    timeout: float | None = None,
    max_output_chars: int | None = None,
) -> CommandResult:
    """Execute a command and return its combined output.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command. If None, uses current directory.
        timeout: Maximum time in seconds to wait for command. None waits forever.
        max_output_chars: Keep at most this many trailing output characters.

    Returns:
        CommandResult with output and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    result = subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
        timeout=timeout,
        cwd=cwd,
    )
    output, truncated = _bound_output(result.stdout or "", max_output_chars)
    return CommandResult(
        output=output,
        returncode=result.returncode,
        truncated=truncated,
    )


def _bound_output(output: str, limit: int | None) -> tuple[str, bool]:
    """Keep the tail of ``output`` when it exceeds ``limit`` characters."""
    if limit is None or len(output) <= limit:
        return output, False
    dropped = len(output) - limit
    return f"[... {dropped} characters truncated ...]\n{output[-limit:]}", True


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def format_command(args: list[str]) -> str:
    """Render an argument vector the way it would be typed in a shell.

    Values of password options are masked; the rendered text is written
    to logs and the output file, never executed.
    """
    shown: list[str] = []
    masked = False
    for arg in args:
        if masked:
            shown.append(REDACTED)
            masked = False
            continue
        option, sep, _ = arg.partition("=")
        if option in SECRET_OPTIONS and sep:
            shown.append(f"{option}={REDACTED}")
            continue
        masked = arg in SECRET_OPTIONS
        shown.append(arg)
    return shlex.join(shown)
