"""Fake HTTP transport for testing."""

import json
from typing import Any, Optional, Union
from urllib.parse import parse_qsl

import httpx

QueuedReply = Union[httpx.Response, Exception]


class FakeTransport(httpx.MockTransport):
    """In-memory httpx transport that records requests and replays queued replies.

    Replies are consumed in order; once the queue is empty every request gets
    an empty ``200``. Queue an exception (e.g. ``httpx.ConnectError``) to
    simulate a transport failure.

    Usage:
        transport = FakeTransport()
        transport.reply_json({"ok": True})
        adapter = PlausibleAdapter(..., transport=transport)
        adapter.send(event)
        assert transport.call_count == 2
    """

    def __init__(self, *replies: QueuedReply) -> None:
        """Initialize with optional queued replies."""
        self.requests: list[httpx.Request] = []
        self._replies: list[QueuedReply] = list(replies)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            return httpx.Response(200, text="")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    # Queueing helpers

    def reply(
        self, status_code: int = 200, text: str = "", content_type: Optional[str] = None
    ) -> None:
        """Queue a text reply."""
        headers = {"Content-Type": content_type} if content_type else {}
        self._replies.append(httpx.Response(status_code, text=text, headers=headers))

    def reply_json(self, body: Any, status_code: int = 200) -> None:
        """Queue a JSON reply."""
        self._replies.append(
            httpx.Response(
                status_code,
                content=json.dumps(body).encode("utf-8"),
                headers={"Content-Type": "application/json; charset=utf-8"},
            )
        )

    def fail(self, exc: Exception) -> None:
        """Queue a transport failure."""
        self._replies.append(exc)

    # Assertion helpers

    @property
    def call_count(self) -> int:
        """Number of requests that reached the transport."""
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        """The most recent request, or raise AssertionError."""
        if not self.requests:
            raise AssertionError("No request reached the transport")
        return self.requests[-1]

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        """Decode a URL-encoded request body."""
        return dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))

    @staticmethod
    def json(request: httpx.Request) -> Any:
        """Decode a JSON request body."""
        return json.loads(request.content)
