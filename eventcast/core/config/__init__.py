"""Configuration module for eventcast.

Provides centralized configuration management with type-safe enums.

Usage:
    from eventcast.core.config import settings, AdapterKind

    if settings.ANALYTICS_ENABLED:
        ...
"""

from eventcast.core.config.enums import AdapterKind
from eventcast.core.config.settings import (
    DEFAULT_USER_AGENT,
    GoogleAnalyticsConfig,
    PlausibleConfig,
    Settings,
)

__all__ = [
    "AdapterKind",
    "DEFAULT_USER_AGENT",
    "GoogleAnalyticsConfig",
    "PlausibleConfig",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
