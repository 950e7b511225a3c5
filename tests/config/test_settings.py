"""Tests for MonthPickSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from monthpick.config.settings import MonthPickSettings
from monthpick.domain.errors import ConfigurationError
from monthpick.domain.formats import FormatSpec
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.services.validation import RangeBounds


class TestMonthPickSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.format.patterns == ["YYYY-MM"]
        assert settings.field.auto_open is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "monthpick.toml"
        toml.write_text('[format]\npatterns = ["MM.YYYY", "MM/YYYY"]\n[field]\nlabel = "Month"\n')
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.format.patterns == ["MM.YYYY", "MM/YYYY"]
        assert settings.field.label == "Month"
        assert settings.field.auto_open is True  # default preserved
        assert settings.config_path == toml.resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text("")
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.format.patterns == ["YYYY-MM"]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[range]\nmin_year = 2020\n")
        settings = MonthPickSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.range.min_year == 2020
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text("[range\nmin_year = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            MonthPickSettings.from_cli(start_dir=tmp_path)


class TestOverrides:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = MonthPickSettings.from_cli(
            start_dir=tmp_path, json_output=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "monthpick.toml").write_text("[range]\nmin_year = 2020\nmax_year = 2026\n")
        monkeypatch.setenv("MONTHPICK_RANGE__MIN_YEAR", "2022")
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.range.min_year == 2022
        assert settings.range.max_year == 2026


class TestEngineConfiguration:
    def test_format_spec(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text('[format]\npatterns = ["MMM YYYY", "MM.YYYY"]\n')
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.format_spec() == FormatSpec.of("MMM YYYY", "MM.YYYY")

    def test_empty_pattern_list_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text("[format]\npatterns = []\n")
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        assert settings.format_spec() == FormatSpec()

    def test_malformed_pattern(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text('[format]\npatterns = ["YYYY"]\n')
        settings = MonthPickSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(ConfigurationError):
            settings.format_spec()

    def test_vocabulary(self, tmp_path: Path) -> None:
        names = ", ".join(f'"m{i}"' for i in range(1, 13))
        (tmp_path / "monthpick.toml").write_text(f"[i18n]\nmonth_names = [{names}]\n")
        vocab = MonthPickSettings.from_cli(start_dir=tmp_path).vocabulary()
        assert vocab.full_names is not None
        assert vocab.full_names[0] == "m1"
        assert vocab.short_names is None

    def test_default_vocabulary_unset(self, tmp_path: Path) -> None:
        vocab = MonthPickSettings.from_cli(start_dir=tmp_path).vocabulary()
        assert vocab == LocaleVocabulary()

    def test_bounds(self, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text("[range]\nmax_year = 2026\n")
        bounds = MonthPickSettings.from_cli(start_dir=tmp_path).bounds()
        assert bounds == RangeBounds(max_year=2026)
