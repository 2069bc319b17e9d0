from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    ("filename", "expected_keys"),
    [
        (
            "getEvents-default.json",
            {"adult", "date", "timezone", "events", "multiday_starting", "multiday_ongoing"},
        ),
        (
            "getEvents-parameters.json",
            {"adult", "date", "timezone", "events", "multiday_starting", "multiday_ongoing"},
        ),
        ("search-default.json", {"query", "adult", "events"}),
        ("search-parameters.json", {"query", "adult", "events"}),
    ],
)
def test_listing_fixture_has_expected_schema(fixture_loader, filename, expected_keys):
    payload = fixture_loader(filename)
    assert expected_keys.issubset(set(payload.keys()))
    assert isinstance(payload["events"], list)
    assert all({"id", "name", "url"} <= set(event) for event in payload["events"])


@pytest.mark.parametrize(
    "filename",
    ["getEventInfo-default.json", "getEventInfo-parameters.json", "getEventInfo-starter.json"],
)
def test_event_info_fixture_has_identity_fields(fixture_loader, filename):
    event = fixture_loader(filename)["event"]
    assert {"id", "name", "url", "adult", "alternate_names"}.issubset(set(event.keys()))
