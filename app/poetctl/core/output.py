"""Last command output slot.

Each executed command overwrites ``last-output.log`` in the state
directory, so the full output of the most recent command can be inspected
after the fact (``poetctl output``).
"""

import logging
from pathlib import Path

from poetctl.core.paths import get_output_log_path
from poetctl.core.runner import ExecutionResult

logger = logging.getLogger(__name__)


class OutputLog:
    """File-backed slot holding the output of the most recent command.

    Attributes:
        path: Location of the log file.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_output_log_path()

    def write(self, result: ExecutionResult) -> Path | None:
        """Replace the slot contents with ``result.output``.

        Returns:
            Path of the written log, or None if it could not be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(result.output, encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write command output to %s: %s", self.path, e)
            return None
        return self.path

    def read(self) -> str | None:
        """Return the last recorded output, or None if nothing was recorded."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
