"""Tests for the root CLI group."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mealer import __version__
from mealer.cli import cli


class TestCli:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "complaints" in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_complaints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["complaints", "--help"])
        assert result.exit_code == 0
        for sub in ("list", "add", "remove"):
            assert sub in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestCliConfigErrors:
    def test_missing_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "complaints", "list"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_config_value(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "mealer.toml").write_text('[store]\nbackend = "mongo"\n')
        result = cli_runner.invoke(cli, ["complaints", "list"])
        assert result.exit_code == 1
        assert "Invalid configuration: store.backend" in result.output

    def test_unknown_section(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "mealer.toml").write_text("[vault]\n")
        result = cli_runner.invoke(cli, ["complaints", "list"])
        assert result.exit_code == 1
        assert "Unknown section(s)" in result.output
