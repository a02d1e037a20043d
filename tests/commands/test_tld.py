"""Tests for the tld command group."""

from __future__ import annotations

import json

from click.testing import CliRunner

from domaddr.cli import cli
from domaddr.domain.registry import TLD_REGISTRY


class TestTldShow:
    def test_known(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tld", "show", "UK"])
        assert result.exit_code == 0
        assert "code: uk" in result.stdout
        assert "Nominet" in result.stdout

    def test_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tld", "show", "notarealtld"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNKNOWN_TLD"


class TestTldList:
    def test_type_filter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tld", "list", "--type", "infrastructure"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [i["code"] for i in data["data"]["items"]] == ["arpa"]

    def test_limit_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "tld", "list", "--limit", "3"])
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 3
        assert f"Showing 3 of {len(TLD_REGISTRY)} entries" in result.stderr

    def test_bad_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tld", "list", "--type", "bogus"])
        assert result.exit_code == 2

    def test_config_limit(self, cli_runner: CliRunner) -> None:
        with cli_runner.isolated_filesystem():
            with open("domaddr.toml", "w", encoding="utf-8") as fh:
                fh.write("[registry]\nlist_limit = 4\n")
            result = cli_runner.invoke(cli, ["--json", "tld", "list"])
        assert json.loads(result.stdout)["data"]["count"] == 4


class TestTldCheck:
    def test_check(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tld", "check", "co", "zz", "c0m"])
        assert result.exit_code == 0
        items = json.loads(result.stdout)["data"]["items"]
        assert [(i["code"], i["syntax_ok"], i["known"]) for i in items] == [
            ("co", True, True),
            ("zz", True, False),
            ("c0m", False, False),
        ]
