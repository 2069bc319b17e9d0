from __future__ import annotations

import pytest

from holiday_event_api.core.errors import HolidayEventApiParseError
from holiday_event_api.core.response_parsing import parse_json_payload, resolve_error_message


class _Response:
    def __init__(self, payload):
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_parse_json_payload_wraps_decode_errors():
    with pytest.raises(HolidayEventApiParseError, match="^Can't parse response: bad json$"):
        parse_json_payload(_Response(ValueError("bad json")), http_status=200)


def test_parse_json_payload_rejects_non_object_root():
    with pytest.raises(HolidayEventApiParseError, match="expected a JSON object, got list"):
        parse_json_payload(_Response([1, 2, 3]), http_status=200)


def test_parse_json_payload_returns_dict_payload():
    assert parse_json_payload(_Response({"adult": False}), http_status=200) == {"adult": False}


def test_error_message_prefers_api_error_field():
    assert resolve_error_message(_Response({"error": "MyError!"}), http_status=401) == "MyError!"


@pytest.mark.parametrize(
    ("payload", "http_status", "expected"),
    [
        (ValueError("no body"), 500, "Internal Server Error"),
        ({"error": ""}, 404, "Not Found"),
        ({"message": "x"}, 401, "Unauthorized"),
        ({"error": "x", "code": 7}, 400, "Bad Request"),
        (["error"], 503, "Service Unavailable"),
        (ValueError("no body"), 599, "599"),
    ],
    ids=["no-body", "empty-error", "no-error-field", "not-flat", "not-object", "unknown-status"],
)
def test_error_message_falls_back_to_reason_phrase_then_code(payload, http_status, expected):
    assert resolve_error_message(_Response(payload), http_status=http_status) == expected
