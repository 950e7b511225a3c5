"""Tests for the format command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from monthpick.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestFormatCommand:
    def test_default_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "2024-01"])
        assert result.exit_code == 0
        assert "text: 2024-01" in result.output

    def test_names_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        names = ", ".join(
            f'"{n}"'
            for n in ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                      "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
        )
        (tmp_path / "monthpick.toml").write_text(f"[i18n]\nshort_month_names = [{names}]\n")
        result = cli_runner.invoke(cli, ["--json", "format", "2024-01", "-f", "MMM YYYY"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["text"] == "Jan 2024"

    def test_missing_names_exit_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "2024-01", "-f", "MMMM YYYY"])
        assert result.exit_code == 1
        assert "full_names is not set" in result.output

    def test_bad_value_exit_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "January"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "BAD_VALUE"

    def test_out_of_range_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "monthpick.toml").write_text("[range]\nmin_year = 2020\n")
        result = cli_runner.invoke(cli, ["format", "2019-06"])
        assert result.exit_code == 0
        assert "WARNING: 2019-06 is below minimum" in result.output
