"""Analytics adapter registry: in-memory, built once at startup."""

from typing import Any, Optional, Union

import httpx

from eventcast.adapters.analytics.base import BaseAnalyticsAdapter
from eventcast.adapters.analytics.types import AnalyticsAdapterEntry
from eventcast.core.config import AdapterKind, Settings
from eventcast.core.exceptions import AdapterConfigError, UnknownAdapterError
from eventcast.core.logging import get_logger
from eventcast.core.protocols.log_sink import LogSink
from eventcast.core.protocols.registry import RegistryProtocol

registry_logger = get_logger("eventcast.adapters.registry")

ShortName = Union[str, AdapterKind]


def _key(short_name: ShortName) -> str:
    return short_name.value if isinstance(short_name, AdapterKind) else short_name


class AnalyticsAdapterRegistry(RegistryProtocol[AnalyticsAdapterEntry]):
    """In-memory analytics adapter registry, built from manual registration data."""

    def __init__(self) -> None:
        """Initialize with empty entries."""
        self._entries: dict[str, AnalyticsAdapterEntry] = {}

    def get(self, short_name: ShortName) -> AnalyticsAdapterEntry:
        """Get an adapter entry by short name.

        Args:
            short_name: The unique identifier (e.g. "plausible").

        Returns:
            The adapter entry.

        Raises:
            UnknownAdapterError: If no entry with the given short name is registered.
        """
        try:
            return self._entries[_key(short_name)]
        except KeyError:
            raise UnknownAdapterError(_key(short_name), sorted(self._entries)) from None

    def list_all(self) -> list[AnalyticsAdapterEntry]:
        """List all registered adapter entries."""
        return list(self._entries.values())

    def build(self) -> None:
        """Build the registry from ANALYTICS_ADAPTERS.

        Called once at startup. After this, all lookups are dict reads.
        """
        from eventcast.adapters.analytics.registry_data import ANALYTICS_ADAPTERS

        for spec in ANALYTICS_ADAPTERS:
            entry = AnalyticsAdapterEntry(
                short_name=spec.short_name,
                name=spec.name,
                description=spec.description,
                class_name=spec.adapter_class.__name__,
                adapter_class_ref=spec.adapter_class,
                settings_section=spec.settings_section,
                required_settings=spec.required_settings,
                setting_defaults=spec.setting_defaults,
            )
            self._entries[entry.short_name] = entry

        registry_logger.info(f"Built analytics adapter registry with {len(self._entries)} entries.")

    def create(self, short_name: ShortName, *args: Any, **kwargs: Any) -> BaseAnalyticsAdapter:
        """Instantiate a registered adapter with explicit constructor arguments."""
        return self.get(short_name).adapter_class_ref(*args, **kwargs)

    def create_from_settings(
        self,
        short_name: ShortName,
        settings: Optional[Settings] = None,
        *,
        log_sink: Optional[LogSink] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> BaseAnalyticsAdapter:
        """Instantiate a registered adapter from its settings section.

        The adapter starts disabled when ``ANALYTICS_ENABLED`` is false.

        Raises:
            UnknownAdapterError: If the short name is not registered.
            AdapterConfigError: If a required credential is missing.
        """
        if settings is None:
            from eventcast.core.config import settings as default_settings

            settings = default_settings

        entry = self.get(short_name)
        section = getattr(settings, entry.settings_section)

        missing = [name for name in entry.required_settings if not getattr(section, name)]
        if missing:
            raise AdapterConfigError(entry.short_name, missing)

        kwargs = {**entry.setting_defaults, **section.model_dump(exclude_none=True)}
        kwargs.setdefault("user_agent", settings.USER_AGENT)

        adapter = entry.adapter_class_ref(**kwargs, log_sink=log_sink, transport=transport)
        if not settings.ANALYTICS_ENABLED:
            adapter.disable()

        registry_logger.debug(f"Created {entry.name} adapter (enabled={adapter.enabled})")
        return adapter


_registry: Optional[AnalyticsAdapterRegistry] = None


def get_registry() -> AnalyticsAdapterRegistry:
    """Return the process-wide registry, building it on first use."""
    global _registry
    if _registry is None:
        _registry = AnalyticsAdapterRegistry()
        _registry.build()
    return _registry


def create_adapter(short_name: ShortName, *args: Any, **kwargs: Any) -> BaseAnalyticsAdapter:
    """Instantiate a registered adapter by short name."""
    return get_registry().create(short_name, *args, **kwargs)
