"""HTTP call engine shared by all analytics adapters.

One ``AnalyticsHttpClient`` per adapter. It owns the adapter's endpoint base
and default headers, turns ``(method, path, headers, params)`` into a single
blocking request, and translates every failure into the eventcast exception
taxonomy:

- ``TransportError``: no response (DNS, connect, TLS, timeout, bad URL)
- ``HttpError``: response with status >= 400
- ``EncodingError``: params could not be serialized (raised before sending)
- ``ParseError``: response declared JSON but was not

Nothing is retried or swallowed here.
"""

import platform
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from eventcast.core.exceptions import EncodingError, HttpError, ParseError, TransportError
from eventcast.core.logging import get_logger
from eventcast.platform.http.encoding import (
    FORM_URLENCODED,
    MULTIPART,
    append_query,
    decode_body,
    drop_header,
    encode_body,
    get_header,
    merge_headers,
    urlencode_params,
)

logger = get_logger(__name__)

SCHEME_MARKER = "://"


def default_user_agent() -> str:
    """Platform and interpreter identification, e.g. ``Linux-6.1.0:python-3.12.1``."""
    return f"{platform.system()}-{platform.release()}:python-{platform.python_version()}"


@dataclass
class HttpResponse:
    """Decoded response of a single call."""

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None


class AnalyticsHttpClient:
    """Synchronous HTTP call engine.

    Args:
        endpoint: Base URL that relative paths are appended to.
        headers: Default headers; per-call headers override them.
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``).
        follow_redirects: Whether redirects are followed.
    """

    def __init__(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        follow_redirects: bool = True,
    ):
        """Initialize the engine; the underlying httpx client is created lazily."""
        self.endpoint = endpoint
        self.headers: Dict[str, str] = dict(headers or {})
        self._transport = transport
        self._follow_redirects = follow_redirects
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """The pooled httpx client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                transport=self._transport,
                follow_redirects=self._follow_redirects,
                headers={"User-Agent": default_user_agent()},
            )
        return self._client

    def close(self) -> None:
        """Close the pooled client. A later call opens a fresh one."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AnalyticsHttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request assembly
    # ------------------------------------------------------------------

    def resolve_url(self, path: str) -> str:
        """Use absolute URLs verbatim, append anything else to the endpoint."""
        if SCHEME_MARKER in path:
            return path
        return f"{self.endpoint}{path}"

    def build_request(
        self,
        method: str,
        path: str = "",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Request:
        """Assemble the request without sending it.

        Raises:
            EncodingError: If params cannot be encoded for the content type, or a
                header value is not ASCII.
        """
        method = method.upper()
        params = params or {}
        merged = merge_headers(self.headers, headers or {})
        url = self.resolve_url(path)
        content_type = get_header(merged, "Content-Type")
        extra: Dict[str, Any] = {}

        if method == "GET":
            if params:
                url = append_query(url, urlencode_params(params))
        else:
            body = encode_body(content_type, params)
            if body.media_type == MULTIPART and not body.fields:
                # no parts to attach, so there is no boundary to declare
                body = encode_body(FORM_URLENCODED, params)
                content_type = None

            if body.media_type == MULTIPART:
                # httpx writes the header itself so it can add the boundary
                merged = drop_header(merged, "Content-Type")
                extra["files"] = [
                    (name, (None, value.encode("utf-8"))) for name, value in body.fields.items()
                ]
            else:
                extra["content"] = body.content
                if not content_type:
                    merged = drop_header(merged, "Content-Type")
                    merged["Content-Type"] = FORM_URLENCODED

        # Empty values mean "unset" (e.g. a blank default Content-Type)
        merged = {k: v for k, v in merged.items() if v != ""}

        try:
            return self.client.build_request(method, url, headers=merged, **extra)
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid request URL {url!r}: {e}") from e
        except UnicodeEncodeError as e:
            raise EncodingError(f"Header values must be ASCII: {e}") from e

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str = "",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> HttpResponse:
        """Send one request and return the decoded response.

        Raises:
            TransportError: If no response was obtained.
            HttpError: If the response status is >= 400.
            EncodingError: If params cannot be encoded.
            ParseError: If a JSON response body is not valid JSON.
        """
        http_request = self.build_request(method, path, headers, params)
        logger.debug(f"{http_request.method} {http_request.url}")

        try:
            response = self.client.send(http_request)
        except httpx.RequestError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

        return self._handle_response(response)

    def call(
        self,
        method: str,
        path: str = "",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return only its decoded body."""
        return self.request(method, path, headers, params).body

    def _handle_response(self, response: httpx.Response) -> HttpResponse:
        response_headers = {k.lower(): v for k, v in response.headers.items()}
        content_type = response_headers.get("content-type")
        text = response.text

        if response.status_code >= 400:
            try:
                body = decode_body(content_type, text)
            except ParseError:
                body = text
            logger.debug(f"{response.request.url} answered {response.status_code}")
            raise HttpError(response.status_code, body)

        return HttpResponse(
            status_code=response.status_code,
            headers=response_headers,
            body=decode_body(content_type, text),
        )
