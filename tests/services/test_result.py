"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from domaddr.domain.errors import MalformedPortError
from domaddr.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"domain": "example.com"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"domain": "example.com"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_TLD", message="'zz' is not a known TLD")
        result = ServiceResult(ok=False, op="tld_show", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_TLD"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"sld": "example"}, meta={"k": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "parse"
        assert parsed["data"]["sld"] == "example"
        assert parsed["meta"]["k"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="parse")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceErrorFromAddressError:
    def test_carries_kind_raw_and_segment(self) -> None:
        exc = MalformedPortError("example.com:99999", "invalid port '99999'", segment="99999")
        error = ServiceError.from_address_error(exc)
        assert error.code == "MALFORMED_PORT"
        assert error.message == "invalid port '99999'"
        assert error.detail == {"kind": "malformed_port", "raw": "example.com:99999", "segment": "99999"}
