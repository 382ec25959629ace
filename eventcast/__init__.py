"""eventcast: forward analytics events to Google Analytics, Plausible and friends.

Usage:
    from eventcast import Event, GoogleAnalyticsAdapter

    adapter = GoogleAnalyticsAdapter("UA-12345-1", "555")
    adapter.create_event(Event(type="pageview", url="https://example.com/"))
"""

from eventcast.adapters.analytics import (
    BaseAnalyticsAdapter,
    GoogleAnalyticsAdapter,
    PlausibleAdapter,
    create_adapter,
    get_registry,
)
from eventcast.core.exceptions import (
    EncodingError,
    EventcastException,
    HttpError,
    ParseError,
    TransportError,
)
from eventcast.schemas.event import Event

__all__ = [
    "BaseAnalyticsAdapter",
    "EncodingError",
    "Event",
    "EventcastException",
    "GoogleAnalyticsAdapter",
    "HttpError",
    "ParseError",
    "PlausibleAdapter",
    "TransportError",
    "create_adapter",
    "get_registry",
]
