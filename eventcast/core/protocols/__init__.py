"""Core protocols for dependency injection."""

from eventcast.core.protocols.analytics import AnalyticsAdapter
from eventcast.core.protocols.log_sink import LogSink
from eventcast.core.protocols.registry import BaseRegistryEntry, RegistryProtocol

__all__ = [
    "AnalyticsAdapter",
    "BaseRegistryEntry",
    "LogSink",
    "RegistryProtocol",
]
