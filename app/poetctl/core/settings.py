"""User settings for poetctl.

Settings are stored in ~/.config/poetctl/config.toml. A missing file is
not an error: every field has a default.
"""

import os
import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from poetctl.core.errors import SettingsError
from poetctl.core.paths import get_settings_path

# Environment variable overriding the configured executable
EXECUTABLE_ENV_VAR = "POETCTL_EXECUTABLE"


class Settings(BaseModel):
    """Configuration for running poetry commands.

    Attributes:
        executable: Name or path of the poetry executable.
        timeout_seconds: Kill commands running longer than this. None blocks
            until the command exits.
        max_output_chars: Upper bound on retained output per command.
        keep_output_log: Write each command's output to the state directory.
    """

    model_config = ConfigDict(extra="forbid")

    executable: Annotated[
        str,
        Field(min_length=1, description="Poetry executable name or path"),
    ] = "poetry"
    timeout_seconds: Annotated[
        int | None,
        Field(ge=1, le=86400, description="Command timeout in seconds (None = no timeout)"),
    ] = None
    max_output_chars: Annotated[
        int,
        Field(ge=1024, description="Maximum retained output characters per command"),
    ] = 1_000_000
    keep_output_log: Annotated[
        bool,
        Field(description="Write the last command output to the state directory"),
    ] = True


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object (defaults if the file does not exist).

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    data: dict[str, Any] = {}
    if settings_path.exists():
        try:
            with open(settings_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
        except OSError as e:
            raise SettingsError(f"Failed to read settings: {e}") from e

    executable = os.environ.get(EXECUTABLE_ENV_VAR)
    if executable:
        data["executable"] = executable

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(
            f"Invalid settings in {settings_path}: {e}",
            hint="Run 'poetctl settings show' to see the accepted keys.",
        ) from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically through a temporary file in the same
    directory.

    Args:
        settings: The Settings object to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    settings_path = path or get_settings_path()
    # TOML has no null, so unset fields are omitted
    data = settings.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
