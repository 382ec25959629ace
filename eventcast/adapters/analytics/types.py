"""Types for the analytics adapters registry."""

from typing import Any, Dict, Tuple

from eventcast.core.protocols.registry import BaseRegistryEntry


class AnalyticsAdapterEntry(BaseRegistryEntry):
    """A registered analytics backend.

    ``settings_section`` names the attribute of ``Settings`` holding the
    backend's credentials; ``required_settings`` lists the fields of that
    section that must be set to build the adapter from configuration.
    """

    adapter_class_ref: type
    settings_section: str
    required_settings: Tuple[str, ...] = ()
    setting_defaults: Dict[str, Any] = {}
