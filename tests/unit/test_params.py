from __future__ import annotations

from holiday_event_api.events.params import (
    build_event_info_params,
    build_events_params,
    build_search_params,
)
from holiday_event_api.events.requests import GetEventInfoRequest, GetEventsRequest, SearchRequest


def test_build_events_params_defaults_to_adult_false_only():
    assert build_events_params(GetEventsRequest()) == {"adult": "false"}


def test_build_events_params_includes_set_parameters():
    request = GetEventsRequest(date="now", adult=True, timezone="America/New_York")
    assert build_events_params(request) == {
        "adult": "true",
        "timezone": "America/New_York",
        "date": "now",
    }


def test_build_events_params_keeps_explicit_empty_strings():
    params = build_events_params(GetEventsRequest(date="", timezone=""))
    assert params == {"adult": "false", "timezone": "", "date": ""}


def test_build_event_info_params_omits_unset_year_bounds():
    params = build_event_info_params(GetEventInfoRequest(id="f90b893ea04939d7456f30c54f68d7b4"))
    assert params == {"id": "f90b893ea04939d7456f30c54f68d7b4"}


def test_build_event_info_params_stringifies_year_bounds():
    params = build_event_info_params(GetEventInfoRequest(id="abc", start=2002, end=2003))
    assert params == {"id": "abc", "start": "2002", "end": "2003"}


def test_build_event_info_params_keeps_zero_year():
    params = build_event_info_params(GetEventInfoRequest(id="abc", start=0))
    assert params["start"] == "0"
    assert "end" not in params


def test_build_search_params_always_sends_adult():
    assert build_search_params(SearchRequest(query="zucchini")) == {
        "query": "zucchini",
        "adult": "false",
    }
    assert build_search_params(SearchRequest(query="porch day", adult=True))["adult"] == "true"
