"""Tests for the root domaddr CLI."""

from click.testing import CliRunner

from domaddr import __version__
from domaddr.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "domaddr" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in ("--json", "-q", "-v", "--log-json"):
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0, flag


def test_explicit_config(cli_runner: CliRunner) -> None:
    with cli_runner.isolated_filesystem():
        with open("custom.toml", "w", encoding="utf-8") as fh:
            fh.write("[registry]\nshow_dates = false\n")
        result = cli_runner.invoke(cli, ["--json", "-c", "custom.toml", "tld", "show", "com"])
    assert result.exit_code == 0
    assert "registered_on" not in result.stdout


def test_invalid_toml_reports_error(cli_runner: CliRunner) -> None:
    with cli_runner.isolated_filesystem():
        with open("domaddr.toml", "w", encoding="utf-8") as fh:
            fh.write("[parse\n")
        result = cli_runner.invoke(cli, ["parse", "example.com"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_short_help_and_version(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["-h"]).exit_code == 0
    result = cli_runner.invoke(cli, ["-V"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_missing_config_file_is_a_usage_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "nope.toml", "parse", "example.com"])
    assert result.exit_code == 2
    assert "nope.toml" in result.output
