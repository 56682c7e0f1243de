"""Testes do correlation_id e das métricas em log."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    get_correlation_id,
    record_latency,
    record_panel_event,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"

    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_uuid() -> None:
    token = set_correlation_id()
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)


def test_metrics_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_latency("supabase_gateway", "search", 12.345)
        record_panel_event("vendedor_delete", "confirmed")

    latency, event = caplog.records[-2:]
    assert latency.getMessage() == "metric_latency"
    assert latency.latency_ms == 12.35
    assert event.outcome == "confirmed"
