"""Fake analytics adapter for testing."""

from typing import Optional

from eventcast.adapters.analytics.base import BaseAnalyticsAdapter
from eventcast.core.protocols.log_sink import LogSink
from eventcast.schemas.event import Event


class FakeAnalyticsAdapter(BaseAnalyticsAdapter):
    """In-memory test double for AnalyticsAdapter.

    Records every delivered event instead of calling a backend. Set
    ``fail_with`` to make ``send`` raise, e.g. to exercise the error bridge.

    Usage:
        adapter = FakeAnalyticsAdapter()
        adapter.create_event(event)
        assert adapter.has("signup")
    """

    ENDPOINT = "https://analytics.invalid"

    def __init__(
        self,
        *,
        fail_with: Optional[Exception] = None,
        log_sink: Optional[LogSink] = None,
    ) -> None:
        """Initialize with no recorded events."""
        super().__init__(log_sink=log_sink)
        self.fail_with = fail_with
        self.events: list[Event] = []
        self.send_calls = 0

    @property
    def name(self) -> str:
        """Adapter display name."""
        return "Fake"

    def send(self, event: Event) -> bool:
        """Record the event, or raise ``fail_with``."""
        self.send_calls += 1
        if not self.enabled:
            return False
        if self.fail_with is not None:
            raise self.fail_with
        self.events.append(event)
        return True

    # Test helpers

    def has(self, event_type: str) -> bool:
        """Return True if an event of the given type was delivered."""
        return any(e.type == event_type for e in self.events)

    def clear(self) -> None:
        """Reset recorded events."""
        self.events.clear()
        self.send_calls = 0
