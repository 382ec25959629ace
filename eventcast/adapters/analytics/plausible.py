"""Plausible analytics adapter."""

from typing import Any, Dict, Optional

import httpx

from eventcast.adapters.analytics.base import BaseAnalyticsAdapter
from eventcast.core.protocols.log_sink import LogSink
from eventcast.platform.http.encoding import FORM_URLENCODED, JSON
from eventcast.schemas.event import Event

GOALS_PATH = "/v1/sites/goals"
EVENT_PATH = "/event"


class PlausibleAdapter(BaseAnalyticsAdapter):
    """Sends events to the Plausible Events API.

    Plausible only records custom events that match a configured goal, so
    every ``send`` first upserts a goal named after the event type through
    the Sites API and only then posts the event. A failed upsert raises and
    the event is never posted.

    Args:
        domain: Site domain as registered in Plausible.
        api_key: Sites API key, used as bearer token for goal provisioning.
        user_agent: User agent forwarded with every event.
        client_ip: IP address forwarded with every event.
    """

    ENDPOINT = "https://plausible.io/api"

    def __init__(
        self,
        domain: str,
        api_key: str,
        user_agent: str,
        client_ip: str,
        *,
        endpoint: Optional[str] = None,
        log_sink: Optional[LogSink] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Configure the adapter for one site."""
        super().__init__(
            endpoint=endpoint,
            user_agent=user_agent,
            client_ip=client_ip,
            log_sink=log_sink,
            transport=transport,
        )
        self._domain = domain
        self._api_key = api_key

    @property
    def name(self) -> str:
        """Adapter display name."""
        return "Plausible"

    @property
    def domain(self) -> str:
        """Site domain events are recorded for."""
        return self._domain

    def send(self, event: Event) -> bool:
        """Provision the goal for ``event.type`` and post the event."""
        if not self.enabled:
            return False

        self.provision_goal(event.type)
        self.call("POST", EVENT_PATH, self.event_headers(), self.build_params(event))
        return True

    def provision_goal(self, event_name: str) -> Any:
        """Create (or keep) the custom-event goal named ``event_name``.

        The Sites API upserts goals, so calling this for every event is safe.
        """
        params = {
            "site_id": self._domain,
            "goal_type": "event",
            "event_name": event_name,
        }
        headers = {
            "Content-Type": FORM_URLENCODED,
            "Authorization": f"Bearer {self._api_key}",
        }
        return self.call("PUT", GOALS_PATH, headers, params)

    def build_params(self, event: Event) -> Dict[str, Any]:
        """JSON body of the event request; unset fields are omitted."""
        params = {
            "url": event.url,
            "props": dict(event.props),
            "domain": self._domain,
            "name": event.type,
            "referrer": event.get_prop("referrer"),
            "screen_width": event.get_prop("screenWidth"),
        }
        return {key: value for key, value in params.items() if value is not None and value != ""}

    def event_headers(self) -> Dict[str, str]:
        """Headers identifying the visitor to Plausible."""
        return {
            "X-Forwarded-For": self.client_ip or "",
            "User-Agent": self.user_agent,
            "Content-Type": JSON,
        }
