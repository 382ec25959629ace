"""Manual registration data for analytics adapters.

This is the single source of truth for all shipped analytics backends.
Add new backends here; the registry reads this when it is built.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from eventcast.adapters.analytics.google_analytics import GoogleAnalyticsAdapter
from eventcast.adapters.analytics.plausible import PlausibleAdapter
from eventcast.core.config.enums import AdapterKind


@dataclass(frozen=True)
class AnalyticsAdapterSpec:
    """Specification for registering an analytics backend."""

    short_name: str
    name: str
    description: str
    adapter_class: type
    settings_section: str
    required_settings: Tuple[str, ...]
    setting_defaults: Dict[str, Any] = field(default_factory=dict)


ANALYTICS_ADAPTERS: list[AnalyticsAdapterSpec] = [
    AnalyticsAdapterSpec(
        short_name=AdapterKind.GOOGLE_ANALYTICS.value,
        name="Google Analytics",
        description="Universal Analytics Measurement Protocol hits (pageviews and events)",
        adapter_class=GoogleAnalyticsAdapter,
        settings_section="GOOGLE_ANALYTICS",
        required_settings=("tracking_id", "client_id"),
    ),
    AnalyticsAdapterSpec(
        short_name=AdapterKind.PLAUSIBLE.value,
        name="Plausible",
        description="Plausible Events API with automatic goal provisioning",
        adapter_class=PlausibleAdapter,
        settings_section="PLAUSIBLE",
        required_settings=("domain", "api_key"),
        setting_defaults={"client_ip": ""},
    ),
]
