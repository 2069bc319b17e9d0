"""Parsers from Holiday and Event API JSON payloads into typed response objects."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TypeVar

from ..core.date_or_timestamp import DateOrTimestamp, parse_date_or_timestamp
from ..core.errors import HolidayEventApiParseError
from .models import (
    AlternateName,
    Analytics,
    EventInfo,
    EventSummary,
    FounderInfo,
    GetEventInfoResponse,
    GetEventsResponse,
    ImageInfo,
    Occurrence,
    Pattern,
    RichText,
    SearchResponse,
    Tag,
)

JsonObject = dict[str, object]
T = TypeVar("T")
Converter = Callable[[object, str], T]

_MISSING = object()


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _invalid(path: str, expected: str, value: object) -> HolidayEventApiParseError:
    return HolidayEventApiParseError(
        f"invalid type for field `{path}`: expected {expected}, got {_type_name(value)}"
    )


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _field(obj: JsonObject, key: str, path: str, convert: Converter[T]) -> T:
    child = _child(path, key)
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise HolidayEventApiParseError(f"missing field `{child}`")
    return convert(value, child)


def _optional(obj: JsonObject, key: str, path: str, convert: Converter[T]) -> T | None:
    """Absent and ``null`` both mean the group was not returned."""

    value = obj.get(key)
    if value is None:
        return None
    return convert(value, _child(path, key))


def _str(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise _invalid(path, "a string", value)
    return value


def _bool(value: object, path: str) -> bool:
    if not isinstance(value, bool):
        raise _invalid(path, "a boolean", value)
    return value


def _int(value: object, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(path, "an integer", value)
    return value


def _object(value: object, path: str) -> JsonObject:
    if not isinstance(value, dict):
        raise _invalid(path, "an object", value)
    return value


def _date(value: object, path: str) -> DateOrTimestamp:
    try:
        return parse_date_or_timestamp(value)
    except ValueError as exc:
        raise _invalid(path, "a date string or an integer timestamp", value) from exc


def _list(value: object, path: str, *, item: Converter[T]) -> tuple[T, ...]:
    if not isinstance(value, list):
        raise _invalid(path, "an array", value)
    return tuple(item(entry, f"{path}[{index}]") for index, entry in enumerate(value))


def _list_of(item: Converter[T]) -> Converter[tuple[T, ...]]:
    return partial(_list, item=item)


def _summary(value: object, path: str) -> EventSummary:
    obj = _object(value, path)
    return EventSummary(
        id=_field(obj, "id", path, _str),
        name=_field(obj, "name", path, _str),
        url=_field(obj, "url", path, _str),
    )


def _alternate_name(value: object, path: str) -> AlternateName:
    obj = _object(value, path)
    return AlternateName(
        name=_field(obj, "name", path, _str),
        first_year=_optional(obj, "first_year", path, _int),
        last_year=_optional(obj, "last_year", path, _int),
    )


def _image(value: object, path: str) -> ImageInfo:
    obj = _object(value, path)
    return ImageInfo(
        small=_field(obj, "small", path, _str),
        medium=_field(obj, "medium", path, _str),
        large=_field(obj, "large", path, _str),
    )


def _rich_text(value: object, path: str) -> RichText:
    obj = _object(value, path)
    return RichText(
        text=_optional(obj, "text", path, _str),
        html=_optional(obj, "html", path, _str),
        markdown=_optional(obj, "markdown", path, _str),
    )


def _pattern(value: object, path: str) -> Pattern:
    obj = _object(value, path)
    return Pattern(
        observed=_field(obj, "observed", path, _str),
        observed_html=_field(obj, "observed_html", path, _str),
        observed_markdown=_field(obj, "observed_markdown", path, _str),
        length=_field(obj, "length", path, _int),
        first_year=_optional(obj, "first_year", path, _int),
        last_year=_optional(obj, "last_year", path, _int),
    )


def _occurrence(value: object, path: str) -> Occurrence:
    obj = _object(value, path)
    return Occurrence(
        date=_field(obj, "date", path, _date),
        length=_field(obj, "length", path, _int),
    )


def _founder(value: object, path: str) -> FounderInfo:
    obj = _object(value, path)
    return FounderInfo(
        name=_field(obj, "name", path, _str),
        url=_optional(obj, "url", path, _str),
        date=_optional(obj, "date", path, _str),
    )


def _analytics(value: object, path: str) -> Analytics:
    obj = _object(value, path)
    return Analytics(
        overall_rank=_field(obj, "overall_rank", path, _int),
        social_rank=_field(obj, "social_rank", path, _int),
        social_shares=_field(obj, "social_shares", path, _int),
        popularity=_field(obj, "popularity", path, _str),
    )


def _tag(value: object, path: str) -> Tag:
    obj = _object(value, path)
    return Tag(name=_field(obj, "name", path, _str))


def _event_info(value: object, path: str) -> EventInfo:
    obj = _object(value, path)
    return EventInfo(
        id=_field(obj, "id", path, _str),
        name=_field(obj, "name", path, _str),
        url=_field(obj, "url", path, _str),
        adult=_field(obj, "adult", path, _bool),
        alternate_names=_field(obj, "alternate_names", path, _list_of(_alternate_name)),
        hashtags=_optional(obj, "hashtags", path, _list_of(_str)),
        image=_optional(obj, "image", path, _image),
        sources=_optional(obj, "sources", path, _list_of(_str)),
        description=_optional(obj, "description", path, _rich_text),
        how_to_observe=_optional(obj, "how_to_observe", path, _rich_text),
        patterns=_optional(obj, "patterns", path, _list_of(_pattern)),
        occurrences=_optional(obj, "occurrences", path, _list_of(_occurrence)),
        founders=_optional(obj, "founders", path, _list_of(_founder)),
        analytics=_optional(obj, "analytics", path, _analytics),
        tags=_optional(obj, "tags", path, _list_of(_tag)),
    )


def parse_events_response(payload: JsonObject) -> GetEventsResponse:
    summaries = _list_of(_summary)
    return GetEventsResponse(
        adult=_field(payload, "adult", "", _bool),
        date=_field(payload, "date", "", _date),
        timezone=_field(payload, "timezone", "", _str),
        events=_field(payload, "events", "", summaries),
        multiday_starting=_optional(payload, "multiday_starting", "", summaries) or (),
        multiday_ongoing=_optional(payload, "multiday_ongoing", "", summaries) or (),
    )


def parse_event_info_response(payload: JsonObject) -> GetEventInfoResponse:
    return GetEventInfoResponse(event=_field(payload, "event", "", _event_info))


def parse_search_response(payload: JsonObject) -> SearchResponse:
    return SearchResponse(
        query=_field(payload, "query", "", _str),
        adult=_field(payload, "adult", "", _bool),
        events=_field(payload, "events", "", _list_of(_summary)),
    )


__all__ = [
    "parse_events_response",
    "parse_event_info_response",
    "parse_search_response",
]
