from __future__ import annotations

import os

import pytest

from holiday_event_api import HolidayEventApi
from holiday_event_api.core.date_or_timestamp import DateValue, TimestampValue
from holiday_event_api.events.requests import GetEventInfoRequest, GetEventsRequest, SearchRequest


pytestmark = pytest.mark.live


def _live_client() -> HolidayEventApi:
    if os.getenv("HOLIDAY_EVENT_API_RUN_LIVE") != "1":
        pytest.skip("Set HOLIDAY_EVENT_API_RUN_LIVE=1 to run live contract tests")
    api_key = os.getenv("HOLIDAY_EVENT_API_KEY")
    if not api_key:
        pytest.skip("Set HOLIDAY_EVENT_API_KEY to run live contract tests")
    return HolidayEventApi(api_key)


def test_live_get_events_contract_minimum():
    with _live_client() as client:
        result = client.get_events(GetEventsRequest(timezone="America/Chicago"))

    assert isinstance(result.date, (DateValue, TimestampValue))
    assert isinstance(result.events, tuple)
    assert result.rate_limit.limit_month >= result.rate_limit.remaining_month


def test_live_event_info_and_search_contract_minimum():
    with _live_client() as client:
        search = client.search(SearchRequest(query="pizza day"))
        assert search.events
        info = client.get_event_info(GetEventInfoRequest(id=search.events[0].id))

    assert info.event.id == search.events[0].id
    assert isinstance(info.event.alternate_names, tuple)
