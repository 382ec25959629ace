"""Unit tests for the call engine's encoding helpers.

Pure functions only; no transport involved.
"""

import json
from dataclasses import dataclass
from urllib.parse import parse_qsl

import pytest

from eventcast.core.exceptions import EncodingError, ParseError
from eventcast.platform.http.encoding import (
    FORM_URLENCODED,
    JSON,
    MULTIPART,
    append_query,
    decode_body,
    encode_body,
    flatten,
    get_header,
    media_type,
    merge_headers,
    urlencode_params,
)

# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


class TestMediaType:
    def test_strips_parameters(self):
        assert media_type("application/json; charset=utf-8") == JSON

    def test_is_case_insensitive(self):
        assert media_type("Multipart/Form-Data; boundary=x") == MULTIPART

    def test_unset(self):
        assert media_type(None) == ""
        assert media_type("") == ""


class TestMergeHeaders:
    def test_per_call_wins(self):
        merged = merge_headers({"Content-Type": "", "X-A": "1"}, {"Content-Type": JSON})
        assert merged == {"Content-Type": JSON, "X-A": "1"}

    def test_collision_is_case_insensitive(self):
        merged = merge_headers({"content-type": "text/plain"}, {"Content-Type": JSON})
        assert merged == {"Content-Type": JSON}

    def test_defaults_untouched(self):
        defaults = {"X-A": "1"}
        merge_headers(defaults, {"X-A": "2"})
        assert defaults == {"X-A": "1"}

    def test_get_header_case_insensitive(self):
        assert get_header({"CONTENT-TYPE": JSON}, "content-type") == JSON
        assert get_header({}, "content-type") is None


# ---------------------------------------------------------------------------
# Flatten
# ---------------------------------------------------------------------------


@dataclass
class FlattenCase:
    id: str
    data: dict
    expected: dict


FLATTEN_CASES = [
    FlattenCase(id="flat", data={"a": 1, "b": "x"}, expected={"a": 1, "b": "x"}),
    FlattenCase(id="nested", data={"a": {"b": 1}}, expected={"a[b]": 1}),
    FlattenCase(
        id="deep",
        data={"a": {"b": {"c": True}}, "d": 2},
        expected={"a[b][c]": True, "d": 2},
    ),
    FlattenCase(id="list", data={"tags": ["x", "y"]}, expected={"tags[0]": "x", "tags[1]": "y"}),
    FlattenCase(id="empty_branch", data={"a": {}, "b": 1}, expected={"b": 1}),
]


@pytest.mark.parametrize("case", FLATTEN_CASES, ids=[c.id for c in FLATTEN_CASES])
def test_flatten(case: FlattenCase):
    assert flatten(case.data) == case.expected


def test_flatten_collision_last_write_wins():
    data = {"a[b]": "literal", "a": {"b": "nested"}}
    assert flatten(data) == {"a[b]": "nested"}

    reversed_order = {"a": {"b": "nested"}, "a[b]": "literal"}
    assert flatten(reversed_order) == {"a[b]": "literal"}


# ---------------------------------------------------------------------------
# Body encoding
# ---------------------------------------------------------------------------


class TestEncodeBody:
    def test_json(self):
        body = encode_body(JSON, {"a": {"b": 1}})
        assert body.media_type == JSON
        assert json.loads(body.content) == {"a": {"b": 1}}

    def test_json_with_charset_parameter(self):
        body = encode_body("application/json; charset=utf-8", {"x": 1})
        assert body.media_type == JSON

    def test_multipart_flattens(self):
        body = encode_body(MULTIPART, {"a": {"b": 1}, "flag": False})
        assert body.media_type == MULTIPART
        assert body.fields == {"a[b]": "1", "flag": "0"}
        assert body.content is None

    @pytest.mark.parametrize("content_type", [None, "", FORM_URLENCODED, "text/plain"])
    def test_everything_else_is_urlencoded(self, content_type):
        body = encode_body(content_type, {"site_id": "a.b", "goal_type": "event"})
        assert body.media_type == FORM_URLENCODED
        assert dict(parse_qsl(body.content.decode())) == {"site_id": "a.b", "goal_type": "event"}

    def test_unserializable_json_fails_fast(self):
        with pytest.raises(EncodingError):
            encode_body(JSON, {"when": object()})

    def test_nan_is_rejected(self):
        with pytest.raises(EncodingError):
            encode_body(JSON, {"value": float("nan")})


class TestUrlencode:
    def test_drops_none_and_encodes_bools(self):
        encoded = urlencode_params({"a": None, "b": True, "c": False, "d": "x y"})
        assert encoded == "b=1&c=0&d=x+y"

    def test_nested_keys_use_brackets(self):
        assert parse_qsl(urlencode_params({"a": {"b": 1}})) == [("a[b]", "1")]

    def test_append_query(self):
        assert append_query("https://h/p", "a=1") == "https://h/p?a=1"
        assert append_query("https://h/p?x=0", "a=1") == "https://h/p?x=0&a=1"
        assert append_query("https://h/p", "") == "https://h/p"


# ---------------------------------------------------------------------------
# Response decoding
# ---------------------------------------------------------------------------


class TestDecodeBody:
    def test_json_with_charset(self):
        assert decode_body("application/json; charset=utf-8", '{"x":1}') == {"x": 1}

    def test_other_content_types_are_raw(self):
        assert decode_body("text/html", '{"x":1}') == '{"x":1}'
        assert decode_body(None, "GIF89a") == "GIF89a"

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            decode_body(JSON, "<html>")
        assert exc_info.value.body == "<html>"

    def test_empty_json_body_is_none(self):
        assert decode_body(JSON, "") is None
