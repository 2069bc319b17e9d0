"""Request parameter builders for event endpoints."""

from __future__ import annotations

from .requests import GetEventInfoRequest, GetEventsRequest, SearchRequest


def format_bool(value: bool | None) -> str:
    return "true" if value else "false"


def build_events_params(request: GetEventsRequest) -> dict[str, str]:
    params: dict[str, str] = {
        "adult": format_bool(request.adult),
    }
    if request.timezone is not None:
        params["timezone"] = request.timezone
    if request.date is not None:
        params["date"] = request.date
    return params


def build_event_info_params(request: GetEventInfoRequest) -> dict[str, str]:
    params: dict[str, str] = {
        "id": request.id,
    }
    if request.start is not None:
        params["start"] = str(request.start)
    if request.end is not None:
        params["end"] = str(request.end)
    return params


def build_search_params(request: SearchRequest) -> dict[str, str]:
    return {
        "query": request.query,
        "adult": format_bool(request.adult),
    }


__all__ = [
    "format_bool",
    "build_events_params",
    "build_event_info_params",
    "build_search_params",
]
