"""HTTP call engine used by the analytics adapters."""

from eventcast.platform.http.client import AnalyticsHttpClient, HttpResponse, default_user_agent
from eventcast.platform.http.encoding import (
    FORM_URLENCODED,
    JSON,
    MULTIPART,
    EncodedBody,
    encode_body,
    flatten,
)

__all__ = [
    "AnalyticsHttpClient",
    "EncodedBody",
    "FORM_URLENCODED",
    "HttpResponse",
    "JSON",
    "MULTIPART",
    "default_user_agent",
    "encode_body",
    "flatten",
]
