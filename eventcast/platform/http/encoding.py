"""Request/response encoding helpers for the HTTP call engine.

Everything here is a pure function of its inputs so the encoding rules can be
tested without a transport:

- the effective ``Content-Type`` header picks the body encoding
  (JSON, multipart form fields, or URL-encoded form),
- nested params are flattened with PHP-style bracket keys (``a[b][c]``),
- JSON responses are decoded, anything else is returned as text.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from eventcast.core.exceptions import EncodingError, ParseError

JSON = "application/json"
MULTIPART = "multipart/form-data"
FORM_URLENCODED = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class EncodedBody:
    """A request body ready for the transport.

    Exactly one of ``content`` (raw bytes) or ``fields`` (multipart form
    fields, the transport builds the boundary) is meaningful, depending on
    ``media_type``.
    """

    media_type: str
    content: Optional[bytes] = None
    fields: Dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


def media_type(content_type: Optional[str]) -> str:
    """Return the lower-cased media type without parameters (``; charset=...``)."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def get_header(headers: Mapping, name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def drop_header(headers: Mapping, name: str) -> Dict[str, str]:
    """Return a copy of ``headers`` without ``name`` (case-insensitive)."""
    wanted = name.lower()
    return {k: v for k, v in headers.items() if k.lower() != wanted}


def merge_headers(defaults: Mapping, overrides: Mapping) -> Dict[str, str]:
    """Merge per-call headers over defaults; per-call wins on collision."""
    merged = dict(defaults)
    for key, value in overrides.items():
        merged = drop_header(merged, key)
        merged[key] = value
    return merged


# ---------------------------------------------------------------------------
# Params
# ---------------------------------------------------------------------------


def flatten(data: Any, prefix: str = "") -> Dict[str, Any]:
    """Flatten nested params to a single level using bracket notation.

    ``{"a": {"b": 1}, "c": [5, 6]}`` becomes ``{"a[b]": 1, "c[0]": 5, "c[1]": 6}``.
    When two paths flatten to the same key, the one visited last wins.
    """
    items = data.items() if isinstance(data, Mapping) else enumerate(data)
    output: Dict[str, Any] = {}

    for key, value in items:
        final_key = f"{prefix}[{key}]" if prefix else str(key)

        if isinstance(value, (Mapping, list, tuple)):
            output.update(flatten(value, final_key))
        else:
            output[final_key] = value

    return output


def _to_wire(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def form_fields(params: Mapping) -> Dict[str, str]:
    """Flattened params as wire strings, ``None`` values dropped."""
    return {k: _to_wire(v) for k, v in flatten(params).items() if v is not None}


def urlencode_params(params: Mapping) -> str:
    """URL-encode (possibly nested) params as ``key=value`` pairs."""
    return urlencode(list(form_fields(params).items()))


def encode_json(params: Any) -> bytes:
    """Serialize params to JSON, failing fast on values JSON cannot represent."""
    try:
        return json.dumps(params, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Params cannot be encoded as JSON: {e}") from e


def encode_body(content_type: Optional[str], params: Mapping) -> EncodedBody:
    """Pick and apply the body encoding for the effective content type."""
    kind = media_type(content_type)

    if kind == JSON:
        return EncodedBody(media_type=JSON, content=encode_json(params))
    if kind == MULTIPART:
        return EncodedBody(media_type=MULTIPART, fields=form_fields(params))
    return EncodedBody(media_type=FORM_URLENCODED, content=urlencode_params(params).encode("ascii"))


def append_query(url: str, query: str) -> str:
    """Append an encoded query string to ``url``."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


def decode_json(text: str) -> Any:
    """Decode a JSON response body. An empty body decodes to ``None``."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        raise ParseError(f"Response declared JSON but body is not valid JSON: {e}", body=text) from e


def decode_body(content_type: Optional[str], text: str) -> Any:
    """Decode JSON bodies, return everything else as raw text."""
    if media_type(content_type) == JSON:
        return decode_json(text)
    return text
