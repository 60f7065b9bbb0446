"""Unit tests for console colors."""

from pathlib import Path

import pytest
from poetctl.core.theme import ThemeColors, get_rich_theme, load_theme
from pydantic import ValidationError


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_accepts_short_hex(self) -> None:
        """#RGB colors are valid."""
        assert ThemeColors(muted="#fff").muted == "#fff"

    @pytest.mark.parametrize("value", ["red", "#12", "#gggggg", "#1234567", " #fff", 42])
    def test_rejects_invalid_colors(self, value: object) -> None:
        """Non-hex colors are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(muted=value)  # type: ignore[arg-type]

    def test_rejects_unknown_color(self) -> None:
        """Only colors poetctl renders can be set."""
        with pytest.raises(ValidationError):
            ThemeColors.model_validate({"background": "#000000"})

    def test_styles(self) -> None:
        """Every color maps to the style names used in markup."""
        styles = ThemeColors(error="#ff0000").styles()

        assert styles["error"] == "bold #ff0000"
        assert set(styles) == {
            "bold_header",
            "border",
            "muted",
            "dependency",
            "optional",
            "info",
            "success",
            "warning",
            "error",
        }


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Without a user theme the defaults are used."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_partial_override(self, tmp_path: Path) -> None:
        """User colors override only the keys they set."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nerror = "#ff0000"\n')

        colors = load_theme(path)

        assert colors.error == "#ff0000"
        assert colors.success == ThemeColors().success

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid user theme falls back to the defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nerror = "crimson"\n')

        assert load_theme(path) == ThemeColors()

    def test_broken_toml_falls_back(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unparseable theme files fall back to the defaults with a warning."""
        path = tmp_path / "theme.toml"
        path.write_text("[colors\n")

        assert load_theme(path) == ThemeColors()
        assert "Ignoring theme file" in caplog.text

    def test_default_path(self, tmp_path: Path) -> None:
        """Without a path the XDG config location is read."""
        theme_dir = tmp_path / "xdg-config" / "poetctl"
        theme_dir.mkdir(parents=True)
        (theme_dir / "theme.toml").write_text('[colors]\noptional = "#123456"\n')

        assert load_theme().optional == "#123456"


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_defines_styles(self) -> None:
        """The Rich theme defines the styles used by the CLI."""
        theme = get_rich_theme(ThemeColors())

        for name in ("error", "success", "dependency", "optional", "bold_header", "muted"):
            assert name in theme.styles
