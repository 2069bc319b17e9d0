"""Fail-fast request validation."""

from __future__ import annotations

from ..core.errors import (
    EVENT_ID_REQUIRED_MESSAGE,
    SEARCH_QUERY_REQUIRED_MESSAGE,
    HolidayEventApiValidationError,
)
from .requests import GetEventInfoRequest, GetEventsRequest, SearchRequest


def _ensure_optional_bool(value: object, *, name: str) -> None:
    if value is not None and not isinstance(value, bool):
        raise HolidayEventApiValidationError(f"{name} must be bool")


def _ensure_optional_int(value: object, *, name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise HolidayEventApiValidationError(f"{name} must be int")


def validate_events_request(request: GetEventsRequest) -> None:
    _ensure_optional_bool(request.adult, name="adult")


def validate_event_info_request(request: GetEventInfoRequest) -> None:
    if not request.id:
        raise HolidayEventApiValidationError(EVENT_ID_REQUIRED_MESSAGE)
    _ensure_optional_int(request.start, name="start")
    _ensure_optional_int(request.end, name="end")


def validate_search_request(request: SearchRequest) -> None:
    if not request.query:
        raise HolidayEventApiValidationError(SEARCH_QUERY_REQUIRED_MESSAGE)
    _ensure_optional_bool(request.adult, name="adult")


__all__ = [
    "validate_events_request",
    "validate_event_info_request",
    "validate_search_request",
]
