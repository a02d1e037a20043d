"""Tests for operation-specific Rich renderers."""

from domaddr.output.renderers import render_quiet, render_result
from domaddr.services.parse import ParseService
from domaddr.services.registry import RegistryService
from domaddr.services.result import ServiceError, ServiceResult
from domaddr.services.telemetry import telemetry


class TestRenderParse:
    def test_components(self) -> None:
        output = render_result(ParseService().parse("www.example.co.uk:443"))
        assert "parse" in output
        assert "domain: www.example.co.uk" in output
        assert "subdomains: www" in output
        assert "name: example" in output
        assert "sld: co" in output
        assert "tld: uk (country-code)" in output
        assert "port: 443 (well-known)" in output
        assert "local: no" in output

    def test_localhost(self) -> None:
        output = render_result(ParseService().parse("localhost"))
        assert "tld: -" in output
        assert "local: yes" in output
        assert "name:" not in output
        assert "port:" not in output

    def test_verbose_shows_telemetry(self) -> None:
        with telemetry():
            result = ParseService().parse("example.com")
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "ParseService.parse" in output
        assert "parse_host_port" in output


class TestRenderValidate:
    def test_table(self) -> None:
        output = render_result(ParseService().validate(["example.com", "example.notarealtld"]))
        assert "example.com" in output
        assert "UNKNOWN_TLD" in output
        assert "valid: 1" in output
        assert "invalid: 1" in output


class TestRenderRegistry:
    def test_show(self) -> None:
        output = render_result(RegistryService().show("com"))
        assert "code: com" in output
        assert "type: generic" in output
        assert "VeriSign" in output
        assert "registered_on: 1985-01-01" in output

    def test_list(self) -> None:
        output = render_result(RegistryService().list_entries(limit=2))
        assert "Code" in output
        assert "count: 2 of" in output

    def test_check(self) -> None:
        output = render_result(RegistryService().check(["uk", "c0m"]))
        assert "uk" in output
        assert "c0m" in output
        assert "bad" in output


class TestRenderError:
    def test_error(self) -> None:
        output = render_result(ParseService().parse("example.notarealtld"))
        assert output.startswith("ERROR")
        assert "parse" in output
        assert "code: UNKNOWN_TLD" in output
        assert "detail:" not in output

    def test_error_verbose_detail(self) -> None:
        output = render_result(ParseService().parse("example.notarealtld"), verbose=True)
        assert "detail:" in output
        assert "segment: notarealtld" in output


class TestRenderQuiet:
    def test_parse(self) -> None:
        assert render_quiet(ParseService().parse("WWW.example.com:80")) == "WWW.example.com:80"

    def test_validate(self) -> None:
        output = render_quiet(ParseService().validate(["example.com", "-bad.com"]))
        assert output.splitlines() == ["valid\texample.com", "invalid\t-bad.com"]

    def test_tld_list(self) -> None:
        assert render_quiet(RegistryService().list_entries(limit=2)).count("\n") == 1

    def test_tld_check(self) -> None:
        assert render_quiet(RegistryService().check(["uk", "zz"])).splitlines() == ["known\tuk", "unknown\tzz"]

    def test_error(self) -> None:
        result = ServiceResult(ok=False, op="parse", error=ServiceError(code="X", message="nope"))
        assert render_quiet(result).startswith("ERROR: parse")

    def test_generic(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="other")) == "OK: other"
