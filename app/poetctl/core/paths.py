"""XDG-compliant path management for poetctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/poetctl/
- State: ~/.local/state/poetctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "poetctl"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/poetctl/ (or XDG_CONFIG_HOME/poetctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data includes the last command output, which should persist
    between runs but is not configuration.

    Returns:
        Path to ~/.local/state/poetctl/ (or XDG_STATE_HOME/poetctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/poetctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/poetctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_output_log_path() -> Path:
    """Get the last command output file path.

    Returns:
        Path to ~/.local/state/poetctl/last-output.log.
    """
    return get_state_dir() / "last-output.log"

