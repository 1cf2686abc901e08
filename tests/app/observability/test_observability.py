"""Testes para correlation_id e métricas via logs."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    record_confidence,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Testes para o ContextVar de correlation_id."""

    def test_set_and_reset(self) -> None:
        token = set_correlation_id("corr-123")
        try:
            assert get_correlation_id() == "corr-123"
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_generates_when_missing(self) -> None:
        token = set_correlation_id(None)
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)

    def test_generate_is_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()


class TestMetrics:
    """Testes para record_latency e record_confidence."""

    def test_record_latency(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_latency("email_dictation", "normalize", 1.23456, "corr-1")

        record = caplog.records[-1]
        assert record.getMessage() == "metric_latency"
        assert record.latency_ms == 1.23
        assert record.component == "email_dictation"
        assert record.correlation_id == "corr-1"

    def test_record_confidence_with_validity(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_confidence("email_dictation", "normalize", 0.99, "corr-2", is_valid=True)

        record = caplog.records[-1]
        assert record.getMessage() == "metric_confidence"
        assert record.confidence == 0.99
        assert record.is_valid is True

    def test_record_confidence_without_validity(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_confidence("email_dictation", "normalize", 0.4)

        record = caplog.records[-1]
        assert not hasattr(record, "is_valid")
