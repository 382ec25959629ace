"""Tests for BaseAnalyticsAdapter: state, fluent setters and the error bridge."""

import logging
from unittest.mock import MagicMock

import pytest

from eventcast.adapters.analytics.fake import FakeAnalyticsAdapter
from eventcast.adapters.log_sink.fake import FakeLogSink
from eventcast.adapters.log_sink.logger import LoggerLogSink
from eventcast.core.config import DEFAULT_USER_AGENT
from eventcast.core.exceptions import HttpError
from eventcast.core.protocols import AnalyticsAdapter
from eventcast.schemas.event import Event

EVENT = Event(type="signup", url="https://example.com/join")


def _build(fail_with=None) -> tuple[FakeLogSink, FakeAnalyticsAdapter]:
    sink = FakeLogSink()
    return sink, FakeAnalyticsAdapter(fail_with=fail_with, log_sink=sink)


class TestState:
    def test_defaults(self):
        _, adapter = _build()
        assert adapter.enabled is True
        assert adapter.client_ip is None
        assert adapter.user_agent == DEFAULT_USER_AGENT
        assert adapter.headers == {}
        assert adapter.endpoint == FakeAnalyticsAdapter.ENDPOINT

    def test_enable_disable(self):
        _, adapter = _build()
        adapter.disable()
        assert adapter.enabled is False
        adapter.enable()
        assert adapter.enabled is True

    def test_fluent_setters_return_self(self):
        _, adapter = _build()
        result = adapter.set_client_ip("203.0.113.9").set_user_agent("agent/2")
        assert result is adapter
        assert adapter.client_ip == "203.0.113.9"
        assert adapter.user_agent == "agent/2"

    def test_satisfies_protocol(self):
        _, adapter = _build()
        assert isinstance(adapter, AnalyticsAdapter)

    def test_default_log_sink_wraps_logger(self):
        adapter = FakeAnalyticsAdapter()
        assert isinstance(adapter.log_sink, LoggerLogSink)


class TestCreateEvent:
    def test_success(self):
        sink, adapter = _build()
        assert adapter.create_event(EVENT) is True
        assert adapter.has("signup")
        assert sink.lines == []

    def test_disabled_returns_false_without_logging(self):
        sink, adapter = _build()
        adapter.disable()
        assert adapter.create_event(EVENT) is False
        assert adapter.events == []
        assert sink.lines == []

    def test_failure_is_logged_not_raised(self):
        sink, adapter = _build(fail_with=HttpError(502, "Bad Gateway"))

        assert adapter.create_event(EVENT) is False

        assert sink.errors[:3] == [
            "[Error] Fake Error: ",
            "[Error] Type: HttpError",
            "[Error] Message: 502: Bad Gateway",
        ]
        assert sink.errors[3].startswith("[Error] Location: ")
        assert "fake.py:" in sink.errors[3]

    def test_any_exception_is_caught(self):
        sink, adapter = _build(fail_with=KeyError("hitParsingResult"))
        assert adapter.create_event(EVENT) is False
        assert sink.has_error("Type: KeyError")

    def test_broken_sink_does_not_change_outcome(self):
        sink = MagicMock()
        sink.error.side_effect = RuntimeError("disk full")
        adapter = FakeAnalyticsAdapter(fail_with=HttpError(500, "boom"), log_sink=sink)

        assert adapter.create_event(EVENT) is False
        assert sink.error.call_count == 4

    def test_send_still_raises(self):
        _, adapter = _build(fail_with=HttpError(500, "boom"))
        with pytest.raises(HttpError):
            adapter.send(EVENT)


def test_format_error_without_traceback():
    _, adapter = _build()
    lines = adapter.format_error(ValueError("never raised"))
    assert lines[-1] == "[Error] Location: unknown"


def test_logger_sink_writes_to_logger(caplog):
    adapter = FakeAnalyticsAdapter(fail_with=HttpError(404, "Not Found"))
    with caplog.at_level(logging.ERROR, logger="eventcast.adapters"):
        assert adapter.create_event(EVENT) is False

    messages = [r.getMessage() for r in caplog.records]
    assert "[Error] Fake Error: " in messages
    assert "[Error] Message: 404: Not Found" in messages


def test_context_manager_closes_http_client():
    with FakeAnalyticsAdapter() as adapter:
        inner = adapter.http.client
    assert inner.is_closed
