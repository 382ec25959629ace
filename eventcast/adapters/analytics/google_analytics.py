"""Google Analytics adapter (Measurement Protocol v1)."""

from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import httpx

from eventcast.adapters.analytics.base import BaseAnalyticsAdapter
from eventcast.core.config import DEFAULT_USER_AGENT
from eventcast.core.exceptions import ParseError
from eventcast.core.protocols.log_sink import LogSink
from eventcast.platform.http.encoding import decode_json
from eventcast.schemas.event import Event

EVENT_HIT = "event"


def _present(value: Any) -> bool:
    return value is not None and value != ""


class GoogleAnalyticsAdapter(BaseAnalyticsAdapter):
    """Sends pageviews and events as Measurement Protocol hits.

    Custom event types are reported as hit type ``event`` with the original
    type as event action (``ea``). With ``debug=True`` hits go to the
    validation endpoint and ``send`` returns Google's verdict instead of True.

    Args:
        tracking_id: Property tracking ID (``tid``).
        client_id: Anonymous client identifier (``cid``).
        debug: Use the hit validation endpoint.
    """

    ENDPOINT = "https://www.google-analytics.com/collect"
    DEBUG_ENDPOINT = "https://www.google-analytics.com/debug/collect"
    PROTOCOL_VERSION = 1

    def __init__(
        self,
        tracking_id: str,
        client_id: str,
        *,
        debug: bool = False,
        endpoint: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        client_ip: Optional[str] = None,
        log_sink: Optional[LogSink] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Configure the adapter with its property credentials."""
        if endpoint is None:
            endpoint = self.DEBUG_ENDPOINT if debug else self.ENDPOINT
        super().__init__(
            endpoint=endpoint,
            user_agent=user_agent,
            client_ip=client_ip,
            log_sink=log_sink,
            transport=transport,
        )
        self._tracking_id = tracking_id
        self._client_id = client_id
        self._debug = debug

    @property
    def name(self) -> str:
        """Adapter display name."""
        return "Google Analytics"

    @property
    def tracking_id(self) -> str:
        """Property tracking ID."""
        return self._tracking_id

    @property
    def client_id(self) -> str:
        """Anonymous client identifier."""
        return self._client_id

    @property
    def debug(self) -> bool:
        """Whether hits are validated instead of recorded."""
        return self._debug

    def send(self, event: Event) -> bool:
        """Send the event as a single hit."""
        if not self.enabled:
            return False

        result = self.call("POST", self.endpoint, {}, self.build_params(event))

        if self._debug:
            return self._parse_validation(result)

        return True

    def build_params(self, event: Event) -> Dict[str, Any]:
        """Full hit payload for ``event``: credentials, protocol version and hit fields."""
        return {
            "tid": self._tracking_id,
            "cid": self._client_id,
            "v": self.PROTOCOL_VERSION,
            **self.build_hit(event),
        }

    def build_hit(self, event: Event) -> Dict[str, Any]:
        """Map an event to Measurement Protocol fields, dropping empty ones."""
        hit_type = event.type
        if not event.is_pageview:
            event = event.with_props(action=event.type)
            hit_type = EVENT_HIT

        width, height = event.get_prop("screenWidth"), event.get_prop("screenHeight")
        if _present(width) and _present(height):
            event = event.with_props(screenResolution=f"{width}x{height}")

        location = urlsplit(event.url)

        query = {
            "ec": event.get_prop("category"),
            "ea": event.get_prop("action"),
            "el": event.name,
            "ev": event.value,
            "dh": location.hostname,
            "dp": location.path,
            "dt": event.get_prop("documentTitle"),
            "t": hit_type,
            "uip": self.client_ip,
            "ua": self.user_agent,
            "sr": event.get_prop("screenResolution"),
            "vp": event.get_prop("viewportSize"),
            "dr": event.get_prop("referrer"),
        }

        account = event.get_prop("account")
        if account:
            query["cd1"] = account

        return {key: value for key, value in query.items() if _present(value)}

    def _parse_validation(self, result: Any) -> bool:
        """Extract ``hitParsingResult[0].valid`` from a validation response."""
        if isinstance(result, str):
            result = decode_json(result)
        try:
            return bool(result["hitParsingResult"][0]["valid"])
        except (KeyError, IndexError, TypeError) as e:
            raise ParseError(f"Unexpected hit validation response: {e!r}", body=result) from e
