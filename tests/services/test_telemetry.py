"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

from domaddr.services.result import ServiceResult
from domaddr.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    telemetry,
    telemetry_enabled,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="child")
        root.children.append(child)
        child.annotate("rows", 3)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"rows": 3}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("test") as span:
            assert span is None

    def test_no_root_yields_none(self) -> None:
        with telemetry(), trace_span("test") as span:
            assert span is None

    def test_nested_under_traced(self) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("outer"):
                with trace_span("inner") as inner:
                    assert inner is not None
                    inner.annotate("k", "v")
            return ServiceResult(ok=True, op="op")

        with telemetry():
            result = op()
        assert result.meta is not None
        outer = result.meta["telemetry"]["children"][0]
        assert outer["name"] == "outer"
        assert outer["children"][0]["annotations"] == {"k": "v"}


class TestTraced:
    def test_noop_when_disabled(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_preserves_existing_meta(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op", meta={"existing": 1})

        with telemetry():
            result = op()
        assert result.meta is not None
        assert result.meta["existing"] == 1
        assert "telemetry" in result.meta

    def test_non_result_passthrough(self) -> None:
        @traced
        def op() -> str:
            return "hello"

        with telemetry():
            assert op() == "hello"

    def test_current_span_reset_after_call(self) -> None:
        @traced
        def op() -> ServiceResult:
            assert get_current_span() is not None
            return ServiceResult(ok=True, op="op")

        with telemetry():
            op()
            assert get_current_span() is None


class TestSwitches:
    def test_enable_disable(self) -> None:
        assert telemetry_enabled() is False
        enable_telemetry()
        assert telemetry_enabled() is True
        disable_telemetry()
        assert telemetry_enabled() is False

    def test_scoped(self) -> None:
        with telemetry():
            assert telemetry_enabled()
        assert not telemetry_enabled()
