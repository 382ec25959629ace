"""Protocol for analytics backend adapters.

Adapter boundary between callers that describe what happened (an ``Event``)
and the analytics provider that records it (Google Analytics, Plausible, ...).
Every provider speaks its own wire protocol; callers only see this surface.
"""

from typing import TYPE_CHECKING, Dict, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from eventcast.schemas.event import Event


@runtime_checkable
class AnalyticsAdapter(Protocol):
    """One analytics backend.

    Instances are long-lived and mutable (enablement, client IP, user agent)
    but not thread-safe: a single caller drives an instance at a time.
    """

    @property
    def name(self) -> str:
        """Human-readable backend name, e.g. ``"Google Analytics"``."""
        ...

    @property
    def enabled(self) -> bool:
        """Whether ``send`` talks to the network at all."""
        ...

    @property
    def client_ip(self) -> Optional[str]:
        """IP address forwarded to the backend, if any."""
        ...

    @property
    def user_agent(self) -> str:
        """User agent forwarded to the backend."""
        ...

    @property
    def endpoint(self) -> str:
        """Base URL relative request paths are joined to."""
        ...

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers sent with every request."""
        ...

    def enable(self) -> None:
        """Turn delivery on."""
        ...

    def disable(self) -> None:
        """Turn delivery off; ``send`` returns False without network calls."""
        ...

    def set_client_ip(self, client_ip: str) -> "AnalyticsAdapter":
        """Set the forwarded client IP and return the adapter."""
        ...

    def set_user_agent(self, user_agent: str) -> "AnalyticsAdapter":
        """Set the forwarded user agent and return the adapter."""
        ...

    def send(self, event: "Event") -> bool:
        """Deliver an event, raising on any failure."""
        ...

    def create_event(self, event: "Event") -> bool:
        """Deliver an event, logging failures and returning False instead of raising."""
        ...

    def close(self) -> None:
        """Release the underlying HTTP resources."""
        ...
