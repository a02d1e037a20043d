"""Tests for ParseService: parse and batch validate."""

import pytest

from domaddr.config.models import DomaddrConfig, ParseConfig
from domaddr.services.parse import ParseService
from domaddr.services.telemetry import telemetry


@pytest.fixture
def svc() -> ParseService:
    return ParseService()


class TestParse:
    def test_components(self, svc: ParseService) -> None:
        result = svc.parse("www.example.co.uk:8443")
        assert result.ok
        assert result.op == "parse"
        d = result.data
        assert d["input"] == "www.example.co.uk:8443"
        assert d["domain"] == "www.example.co.uk"
        assert d["subdomains"] == ["www"]
        assert d["name"] == "example"
        assert d["sld"] == "co"
        assert d["tld"]["code"] == "uk"
        assert d["address_name"] == "example"
        assert d["port"] == {"number": 8443, "type": "registered"}
        assert d["rendered"] == "www.example.co.uk:8443"
        assert d["local"] is False

    def test_localhost(self, svc: ParseService) -> None:
        result = svc.parse("api.localhost")
        assert result.ok
        assert result.data["tld"] is None
        assert result.data["local"] is True
        assert result.data["port"] is None

    @pytest.mark.parametrize(
        "raw,code,segment",
        [
            ("example.com:99999", "MALFORMED_PORT", "99999"),
            ("-bad.com", "MALFORMED_LABEL", "-bad"),
            ("example.notarealtld", "UNKNOWN_TLD", "notarealtld"),
            ("*.www.example.com", "INVALID_COMPOSITION", "*"),
        ],
    )
    def test_failures(self, svc: ParseService, raw: str, code: str, segment: str) -> None:
        result = svc.parse(raw)
        assert result.ok is False
        assert result.op == "parse"
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail["raw"] == raw
        assert result.error.detail["segment"] == segment

    def test_trailing_dot_warns(self, svc: ParseService) -> None:
        result = svc.parse("example.com.")
        assert result.ok
        assert result.data["domain"] == "example.com"
        assert any("Trailing dot" in w for w in result.warnings)

    def test_trailing_dot_disabled(self) -> None:
        svc = ParseService(DomaddrConfig(parse=ParseConfig(allow_trailing_dot=False)))
        result = svc.parse("example.com.")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MALFORMED_LABEL"

    def test_telemetry_meta(self, svc: ParseService) -> None:
        with telemetry():
            result = svc.parse("www.example.com")
        assert result.meta is not None
        span = result.meta["telemetry"]
        assert span["name"] == "ParseService.parse"
        assert [c["name"] for c in span["children"]] == ["parse_host_port", "render"]

    def test_no_meta_by_default(self, svc: ParseService) -> None:
        assert svc.parse("example.com").meta is None


class TestValidate:
    def test_mixed(self, svc: ParseService) -> None:
        result = svc.validate(["example.com", "example.notarealtld", "localhost:99999"])
        assert result.ok
        assert result.op == "validate"
        items = result.data["items"]
        assert [i["valid"] for i in items] == [True, False, False]
        assert items[1]["code"] == "UNKNOWN_TLD"
        assert items[2]["code"] == "MALFORMED_PORT"
        assert result.data["valid_count"] == 1
        assert result.data["invalid_count"] == 2

    def test_strict_fails_on_invalid(self, svc: ParseService) -> None:
        result = svc.validate(["example.com", "-bad.com"], strict=True)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"
        assert result.error.detail == {"invalid": ["-bad.com"]}
        assert result.data["invalid_count"] == 1

    def test_strict_passes_when_all_valid(self, svc: ParseService) -> None:
        result = svc.validate(["example.com", "*.example.org"], strict=True)
        assert result.ok
        assert result.data["invalid_count"] == 0

    def test_accepts_generator(self, svc: ParseService) -> None:
        result = svc.validate(f"{label}.example.com" for label in ("a", "b"))
        assert result.data["valid_count"] == 2
