"""Tests for the format_result dispatcher and OutputSettings."""

import json

from domaddr.output.formatters import OutputSettings, format_result
from domaddr.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="UNKNOWN_TLD", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok("tld_show", code="com"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "tld_show"
        assert data["data"]["code"] == "com"

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["code"] == "UNKNOWN_TLD"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "test"

    def test_quiet_mode(self) -> None:
        output = format_result(_ok("tld_show", code="com"), settings=OutputSettings(quiet=True))
        assert output == "com"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("unknown_op", value=1))
        assert output.startswith("OK")
        assert "value: 1" in output
