"""Request models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class GetEventsRequest:
    """Events for a date. All fields are optional; the API picks today in its default zone."""

    date: str | None = None
    adult: bool | None = None
    timezone: str | None = None


@dataclass(slots=True, frozen=True)
class GetEventInfoRequest:
    """Event details. ``start``/``end`` bound the years used for ``occurrences``."""

    id: str
    start: int | None = None
    end: int | None = None


@dataclass(slots=True, frozen=True)
class SearchRequest:
    query: str
    adult: bool | None = None


__all__ = [
    "GetEventsRequest",
    "GetEventInfoRequest",
    "SearchRequest",
]
