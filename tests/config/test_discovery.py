"""Tests for config discovery and reading."""

from pathlib import Path

import pytest

from monthpick.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    iter_candidates,
    read_config_file,
)
from monthpick.domain.errors import ConfigurationError


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[format]\npatterns = ["MM.YYYY"]\n')
        assert find_config(tmp_path) == config_file.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[format]\npatterns = ["MM.YYYY"]\n')
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file.resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "project"
        child.mkdir()
        nearer = child / CONFIG_FILENAME
        nearer.write_text("")
        assert find_config(child) == nearer.resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[range]\nmin_year = 2020\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_dangling_env_var_disables_walk_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        environ = {CONFIG_ENV_VAR: str(tmp_path / "missing.toml")}
        assert find_config(tmp_path, environ=environ) is None

    def test_explicit_environ(self, tmp_path: Path) -> None:
        config_file = tmp_path / "other.toml"
        config_file.write_text("")
        assert find_config(tmp_path, environ={CONFIG_ENV_VAR: str(config_file)}) == config_file


class TestIterCandidates:
    def test_starts_at_start_and_ends_at_root(self, tmp_path: Path) -> None:
        candidates = list(iter_candidates(tmp_path))
        assert candidates[0] == tmp_path.resolve() / CONFIG_FILENAME
        assert candidates[-1] == Path(tmp_path.resolve().anchor) / CONFIG_FILENAME


class TestReadConfigFile:
    def test_reads_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[format]\npatterns = ["MM.YYYY"]\n[range]\nmax_year = 2026\n')
        data = read_config_file(config_file)
        assert data == {"format": {"patterns": ["MM.YYYY"]}, "range": {"max_year": 2026}}

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_config_file(config_file) == {}

    def test_syntax_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[range\n")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            read_config_file(config_file)
