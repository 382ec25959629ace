"""Base class for analytics backend adapters.

Implements the shared half of the AnalyticsAdapter protocol: enablement,
forwarded client identity, the HTTP call engine, and ``create_event``, the
single place where delivery failures are caught, reported to the log sink and
turned into ``False``. Subclasses implement ``name`` and ``send``.
"""

import traceback
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from eventcast.adapters.log_sink.logger import LoggerLogSink
from eventcast.core.config import DEFAULT_USER_AGENT
from eventcast.core.logging import get_logger
from eventcast.core.protocols.log_sink import LogSink
from eventcast.platform.http.client import AnalyticsHttpClient
from eventcast.schemas.event import Event

logger = get_logger(__name__)


class BaseAnalyticsAdapter(ABC):
    """Common state and behaviour of every analytics backend.

    Attributes:
        ENDPOINT: Default base URL of the backend API.
        DEFAULT_HEADERS: Headers sent with every request unless overridden per call.
    """

    ENDPOINT: str = ""
    DEFAULT_HEADERS: Dict[str, str] = {}

    def __init__(
        self,
        *,
        endpoint: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        client_ip: Optional[str] = None,
        log_sink: Optional[LogSink] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize shared adapter state.

        Args:
            endpoint: Override for ``ENDPOINT``.
            user_agent: User agent forwarded to the backend.
            client_ip: Client IP forwarded to the backend.
            log_sink: Where delivery failures are reported. Defaults to the
                ``eventcast.adapters`` logger.
            transport: Optional httpx transport for the call engine.
        """
        self._enabled = True
        self._user_agent = user_agent
        self._client_ip = client_ip
        self._log_sink: LogSink = log_sink or LoggerLogSink()
        self._http = AnalyticsHttpClient(
            endpoint or self.ENDPOINT,
            headers=dict(self.DEFAULT_HEADERS),
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r}, enabled={self._enabled})"

    # ------------------------------------------------------------------
    # Mutable state
    # ------------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        """Whether ``send`` talks to the network."""
        return self._enabled

    def enable(self) -> None:
        """Enable tracking for this instance."""
        self._enabled = True

    def disable(self) -> None:
        """Disable tracking for this instance."""
        self._enabled = False

    @property
    def client_ip(self) -> Optional[str]:
        """IP address forwarded to the backend."""
        return self._client_ip

    def set_client_ip(self, client_ip: str) -> "BaseAnalyticsAdapter":
        """Set the forwarded client IP address."""
        self._client_ip = client_ip
        return self

    @property
    def user_agent(self) -> str:
        """User agent forwarded to the backend."""
        return self._user_agent

    def set_user_agent(self, user_agent: str) -> "BaseAnalyticsAdapter":
        """Set the forwarded user agent."""
        self._user_agent = user_agent
        return self

    @property
    def log_sink(self) -> LogSink:
        """Sink receiving failure diagnostics."""
        return self._log_sink

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        """Base URL relative request paths are joined to."""
        return self._http.endpoint

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers of the call engine (mutable)."""
        return self._http.headers

    @property
    def http(self) -> AnalyticsHttpClient:
        """The call engine used by ``send``."""
        return self._http

    def call(
        self,
        method: str,
        path: str = "",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make an API call through the call engine and return the decoded body."""
        return self._http.call(method, path, headers, params)

    def close(self) -> None:
        """Release the call engine's connection pool."""
        self._http.close()

    def __enter__(self) -> "BaseAnalyticsAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    @abstractmethod
    def send(self, event: Event) -> bool:
        """Deliver the event to the backend.

        Must return False without any network call when the adapter is
        disabled. Every other failure is raised.
        """

    def create_event(self, event: Event) -> bool:
        """Create an event on the remote analytics platform.

        Never raises: failures are reported to the log sink and turned into False.
        """
        try:
            return self.send(event)
        except Exception as e:
            self.log_error(e)
            return False

    def log_error(self, exc: Exception) -> None:
        """Report a delivery failure to the log sink, one line per fact."""
        for line in self.format_error(exc):
            try:
                self._log_sink.error(line)
            except Exception:
                logger.debug("Log sink rejected an error line", exc_info=True)

    def format_error(self, exc: Exception) -> List[str]:
        """The lines ``log_error`` writes for ``exc``."""
        return [
            f"[Error] {self.name} Error: ",
            f"[Error] Type: {type(exc).__name__}",
            f"[Error] Message: {exc}",
            f"[Error] Location: {_origin(exc)}",
        ]


def _origin(exc: BaseException) -> str:
    """``file:line`` of the frame that raised ``exc``."""
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "unknown"
    frame = frames[-1]
    return f"{frame.filename}:{frame.lineno}"
