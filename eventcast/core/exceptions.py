"""Shared exceptions module.

The HTTP call engine translates provider exceptions (``httpx.*``, ``json.*``)
into these classes so that adapters and callers only ever deal with one
taxonomy. Callers can catch at the granularity they need, e.g.
``except EventcastException`` for everything or ``except HttpError`` for
rejected requests only.
"""

import json
from typing import Any, Optional


class EventcastException(Exception):
    """Base exception for eventcast."""

    pass


# ---------------------------------------------------------------------------
# HTTP call engine
# ---------------------------------------------------------------------------


class TransportError(EventcastException):
    """Exception raised when no response could be obtained (connection, DNS, TLS)."""

    def __init__(self, message: Optional[str] = "Transport failure"):
        """Create a new TransportError instance.

        Args:
        ----
            message (str, optional): The underlying transport error message.

        """
        self.message = message
        super().__init__(self.message)


class HttpError(EventcastException):
    """Exception raised when the remote answered with a status code >= 400."""

    def __init__(self, status_code: int, body: Any = None, message: Optional[str] = None):
        """Create a new HttpError instance.

        Args:
        ----
            status_code (int): The HTTP status code of the response.
            body (Any): The decoded response body, or the raw text if it was not JSON.
            message (str, optional): Custom error message. Derived from the body if omitted.

        """
        if message is None:
            if isinstance(body, (dict, list)):
                message = json.dumps(body)
            else:
                message = f"{status_code}: {body if body is not None else ''}"

        self.status_code = status_code
        self.body = body
        self.message = message
        super().__init__(self.message)


class EncodingError(EventcastException):
    """Exception raised when request params cannot be encoded for the wire."""

    def __init__(self, message: Optional[str] = "Could not encode request body"):
        """Create a new EncodingError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ParseError(EventcastException):
    """Exception raised when a response body does not match its declared format."""

    def __init__(self, message: Optional[str] = "Could not parse response body", body: Any = None):
        """Create a new ParseError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.
            body (Any): The offending response body.

        """
        self.message = message
        self.body = body
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class UnknownAdapterError(EventcastException):
    """Exception raised when an adapter short name is not registered."""

    def __init__(self, short_name: str, available: Optional[list[str]] = None):
        """Create a new UnknownAdapterError instance.

        Args:
        ----
            short_name (str): The requested adapter short name.
            available (list[str], optional): The registered short names.

        """
        self.short_name = short_name
        self.available = available or []
        self.message = f"Unknown analytics adapter: {short_name}. Available: {self.available}"
        super().__init__(self.message)


class AdapterConfigError(EventcastException):
    """Exception raised when settings lack a credential an adapter requires."""

    def __init__(self, adapter_name: str, missing: list[str]):
        """Create a new AdapterConfigError instance.

        Args:
        ----
            adapter_name (str): The adapter short name being built.
            missing (list[str]): The names of the missing settings.

        """
        self.adapter_name = adapter_name
        self.missing = missing
        self.message = f"{adapter_name}: missing required settings {', '.join(missing)}"
        super().__init__(self.message)
