from __future__ import annotations

import httpx
import pytest

from holiday_event_api.core.models import RateLimit, rate_limit_from_headers
from holiday_event_api.events.models import GetEventInfoResponse, EventInfo


def test_rate_limit_defaults_to_zero():
    assert RateLimit() == RateLimit(limit_month=0, remaining_month=0)


def test_rate_limit_headers_are_case_insensitive():
    headers = httpx.Headers(
        {"X-RateLimit-Limit-Month": "100", "x-ratelimit-remaining-month": "88"}
    )
    assert rate_limit_from_headers(headers) == RateLimit(limit_month=100, remaining_month=88)


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"x-ratelimit-limit-month": "abc", "x-ratelimit-remaining-month": ""},
        {"x-ratelimit-limit-month": "-1", "x-ratelimit-remaining-month": "1.5"},
        {"x-ratelimit-limit-month": "1_000", "x-ratelimit-remaining-month": " 7 "},
        {"x-ratelimit-limit-month": "2147483648", "x-ratelimit-remaining-month": "+"},
    ],
    ids=["missing", "not-numeric", "negative-and-fraction", "underscore-and-spaces", "overflow-and-bare-sign"],
)
def test_rate_limit_defaults_when_headers_missing_or_malformed(headers):
    assert rate_limit_from_headers(httpx.Headers(headers)) == RateLimit()


def test_one_header_missing_keeps_the_other():
    headers = httpx.Headers({"x-ratelimit-remaining-month": "7"})
    assert rate_limit_from_headers(headers) == RateLimit(limit_month=0, remaining_month=7)


def test_set_rate_limit_overwrites_frozen_response_field():
    response = GetEventInfoResponse(
        event=EventInfo(id="a", name="A", url="https://example.com/a", adult=False)
    )
    assert response.rate_limit == RateLimit()
    response.set_rate_limit(RateLimit(limit_month=5, remaining_month=4))
    response.set_rate_limit(RateLimit(limit_month=100, remaining_month=88))
    assert response.rate_limit == RateLimit(limit_month=100, remaining_month=88)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("+100", 100), ("0", 0), ("-0", 0), ("2147483647", 2147483647)],
)
def test_rate_limit_accepts_signed_decimal(value, expected):
    headers = httpx.Headers({"x-ratelimit-limit-month": value})
    assert rate_limit_from_headers(headers).limit_month == expected
