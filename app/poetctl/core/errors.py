"""Exception hierarchy for poetctl.

Every error that reaches the CLI boundary inherits from
:class:`PoetctlError` so it can be rendered without a traceback.

Hierarchy
---------
PoetctlError
├── CommandError
├── NoDependenciesError
├── DependencyNotFoundError
├── ProjectNotFoundError
├── ProjectExistsError
└── SettingsError
"""

from __future__ import annotations

from pathlib import Path


class PoetctlError(Exception):
    """Base exception for all poetctl errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class CommandError(PoetctlError):
    """Raised when a poetry command exits non-zero or cannot be started.

    Attributes:
        command: The poetry subcommand (e.g. ``"add"``).
        arguments: Arguments passed after the subcommand.
        exit_status: Exit status of the process. 127 if the executable was
            not found, 126 if it could not be started, 124 on timeout.
        output_location: File holding the full captured output, if written.
        output: Captured output of the invocation.
    """

    def __init__(
        self,
        command: str,
        args: list[str],
        exit_status: int,
        *,
        output_location: Path | None = None,
        output: str = "",
        message: str | None = None,
    ) -> None:
        self.command = command
        self.arguments = list(args)
        self.exit_status = exit_status
        self.output_location = output_location
        self.output = output
        hint = f"See {output_location} for the full output." if output_location else None
        super().__init__(
            message or f"'{command}' failed with exit status {exit_status}",
            hint=hint,
        )


class NoDependenciesError(PoetctlError):
    """Raised when the requested dependency section is absent from the manifest."""


class DependencyNotFoundError(PoetctlError):
    """Raised when a package is not declared in the dependency section."""


class ProjectNotFoundError(PoetctlError):
    """Raised when an operation requires a Poetry project and none encloses the path."""


class ProjectExistsError(PoetctlError):
    """Raised when an operation must run outside a Poetry project but is inside one."""


class SettingsError(PoetctlError):
    """Raised when the settings file cannot be parsed or validated."""
