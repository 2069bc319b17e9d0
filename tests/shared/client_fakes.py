from __future__ import annotations

from holiday_event_api.core.models import RateLimit
from holiday_event_api.core.transport_shared import RawApiResult
from tests.shared.payloads import (
    make_event_info_payload,
    make_events_payload,
    make_search_payload,
)

_PAYLOADS = {
    "events": make_events_payload,
    "event": make_event_info_payload,
    "search": make_search_payload,
}


class DummyTransport:
    def __init__(self, rate_limit: RateLimit | None = None):
        self.closed = False
        self.rate_limit = rate_limit or RateLimit()
        self.calls: list[tuple[str, dict[str, str]]] = []

    def close(self):
        self.closed = True

    def request(self, endpoint: str, *, params: dict[str, str]):
        self.calls.append((endpoint, dict(params)))
        return RawApiResult(payload=_PAYLOADS[endpoint](), rate_limit=self.rate_limit)


class DummyAsyncTransport:
    def __init__(self, rate_limit: RateLimit | None = None):
        self.closed = False
        self.rate_limit = rate_limit or RateLimit()
        self.calls: list[tuple[str, dict[str, str]]] = []

    async def close(self):
        self.closed = True

    async def request(self, endpoint: str, *, params: dict[str, str]):
        self.calls.append((endpoint, dict(params)))
        return RawApiResult(payload=_PAYLOADS[endpoint](), rate_limit=self.rate_limit)
