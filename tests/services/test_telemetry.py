"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import pytest

from workq.services.result import ServiceResult
from workq.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_to_dict(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.annotate("kind", "clear")
        child.end()
        root.end()
        data = root.to_dict()
        assert data["name"] == "root"
        assert data["children"][0]["annotations"] == {"kind": "clear"}
        assert data["duration_ms"] >= 0


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_enabled_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


@traced
def _service() -> ServiceResult:
    with trace_span("step") as span:
        if span is not None:
            span.annotate("n", 1)
    return ServiceResult.success("sample")


@traced
def _failing() -> ServiceResult:
    raise RuntimeError("boom")


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        assert _service().meta is None

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()
        result = _service()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "_service"
        assert tree["children"][0]["name"] == "step"
        assert tree["children"][0]["annotations"] == {"n": 1}

    def test_exception_propagates_and_resets_span(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError):
            _failing()
        assert get_current_span() is None

    def test_get_current_span_disabled(self) -> None:
        assert get_current_span() is None
