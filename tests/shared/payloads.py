from __future__ import annotations


def make_summary_payload(event_id: str, name: str = "Some Day") -> dict[str, object]:
    return {
        "id": event_id,
        "name": name,
        "url": f"https://www.checkiday.com/{event_id}/some-day",
    }


def make_events_payload(
    *,
    date: object = "05/05/2025",
    adult: bool = False,
    timezone: str = "America/Chicago",
    event_ids: tuple[str, ...] = ("a",),
) -> dict[str, object]:
    return {
        "adult": adult,
        "date": date,
        "timezone": timezone,
        "events": [make_summary_payload(event_id) for event_id in event_ids],
        "multiday_starting": [],
        "multiday_ongoing": [],
    }


def make_event_info_payload(event_id: str = "a", **groups: object) -> dict[str, object]:
    event: dict[str, object] = {
        "id": event_id,
        "name": "Some Day",
        "url": f"https://www.checkiday.com/{event_id}/some-day",
        "adult": False,
        "alternate_names": [],
    }
    event.update(groups)
    return {"event": event}


def make_search_payload(query: str = "zucchini", *, adult: bool = False) -> dict[str, object]:
    return {
        "query": query,
        "adult": adult,
        "events": [make_summary_payload("z", "National Zucchini Day")],
    }
