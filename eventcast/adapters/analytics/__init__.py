"""Analytics backend adapters."""

from eventcast.adapters.analytics.base import BaseAnalyticsAdapter
from eventcast.adapters.analytics.fake import FakeAnalyticsAdapter
from eventcast.adapters.analytics.google_analytics import GoogleAnalyticsAdapter
from eventcast.adapters.analytics.plausible import PlausibleAdapter
from eventcast.adapters.analytics.registry import (
    AnalyticsAdapterRegistry,
    create_adapter,
    get_registry,
)

__all__ = [
    "AnalyticsAdapterRegistry",
    "BaseAnalyticsAdapter",
    "FakeAnalyticsAdapter",
    "GoogleAnalyticsAdapter",
    "PlausibleAdapter",
    "create_adapter",
    "get_registry",
]
