"""Unit tests for poetctl settings."""

import tomllib
from pathlib import Path

import pytest
from poetctl.core.errors import SettingsError
from poetctl.core.settings import EXECUTABLE_ENV_VAR, Settings, load_settings, save_settings
from pydantic import ValidationError


class TestSettingsModel:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Defaults block without timeout and keep the output log."""
        settings = Settings()

        assert settings.executable == "poetry"
        assert settings.timeout_seconds is None
        assert settings.max_output_chars == 1_000_000
        assert settings.keep_output_log is True

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            Settings.model_validate({"exe": "poetry"})

    def test_rejects_tiny_output_bound(self) -> None:
        """max_output_chars has a lower bound."""
        with pytest.raises(ValidationError):
            Settings(max_output_chars=10)

    def test_rejects_zero_timeout(self) -> None:
        """timeout_seconds must be positive."""
        with pytest.raises(ValidationError):
            Settings(timeout_seconds=0)


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing settings file is not an error."""
        assert load_settings(tmp_path / "config.toml") == Settings()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values in the file override defaults."""
        path = tmp_path / "config.toml"
        path.write_text('executable = "poetry1.8"\ntimeout_seconds = 600\n')

        settings = load_settings(path)

        assert settings.executable == "poetry1.8"
        assert settings.timeout_seconds == 600

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text("executable = \n")

        with pytest.raises(SettingsError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError with a hint."""
        path = tmp_path / "config.toml"
        path.write_text("max_output_chars = 5\n")

        with pytest.raises(SettingsError) as exc_info:
            load_settings(path)

        assert exc_info.value.hint is not None

    def test_environment_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """POETCTL_EXECUTABLE overrides the configured executable."""
        path = tmp_path / "config.toml"
        path.write_text('executable = "poetry"\n')
        monkeypatch.setenv(EXECUTABLE_ENV_VAR, "/opt/poetry/bin/poetry")

        assert load_settings(path).executable == "/opt/poetry/bin/poetry"

    def test_default_path(self, tmp_path: Path) -> None:
        """Without a path the XDG config location is read."""
        config_dir = tmp_path / "xdg-config" / "poetctl"
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("keep_output_log = false\n")

        assert load_settings().keep_output_log is False


class TestSaveSettings:
    """Tests for save_settings function."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        settings = Settings(executable="poetry2", timeout_seconds=120)

        assert save_settings(settings, path) == path
        assert load_settings(path) == settings

    def test_omits_unset_timeout(self, tmp_path: Path) -> None:
        """None values are left out of the TOML file."""
        path = save_settings(Settings(), tmp_path / "config.toml")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        assert "timeout_seconds" not in data
        assert data["executable"] == "poetry"

    def test_write_failure(self, tmp_path: Path) -> None:
        """An unwritable location raises SettingsError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        with pytest.raises(SettingsError, match="Failed to write"):
            save_settings(Settings(), blocker / "config.toml")
