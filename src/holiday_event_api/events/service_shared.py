"""Shared request preparation and response assembly for sync/async services."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core.models import RateLimited
from ..core.transport_shared import RawApiResult
from .models import GetEventInfoResponse, GetEventsResponse, SearchResponse
from .params import build_event_info_params, build_events_params, build_search_params
from .parser import parse_event_info_response, parse_events_response, parse_search_response
from .requests import GetEventInfoRequest, GetEventsRequest, SearchRequest
from .validators import (
    validate_event_info_request,
    validate_events_request,
    validate_search_request,
)

EVENTS_ENDPOINT = "events"
EVENT_INFO_ENDPOINT = "event"
SEARCH_ENDPOINT = "search"

R = TypeVar("R", bound=RateLimited)


@dataclass(frozen=True)
class PreparedCall(Generic[R]):
    """Endpoint, query params and decoder for one operation."""

    endpoint: str
    params: dict[str, str]
    parse: Callable[[dict[str, object]], R]


def prepare_events_call(request: GetEventsRequest) -> PreparedCall[GetEventsResponse]:
    validate_events_request(request)
    return PreparedCall(EVENTS_ENDPOINT, build_events_params(request), parse_events_response)


def prepare_event_info_call(request: GetEventInfoRequest) -> PreparedCall[GetEventInfoResponse]:
    validate_event_info_request(request)
    return PreparedCall(
        EVENT_INFO_ENDPOINT,
        build_event_info_params(request),
        parse_event_info_response,
    )


def prepare_search_call(request: SearchRequest) -> PreparedCall[SearchResponse]:
    validate_search_request(request)
    return PreparedCall(SEARCH_ENDPOINT, build_search_params(request), parse_search_response)


def assemble_response(call: PreparedCall[R], raw: RawApiResult) -> R:
    response = call.parse(raw.payload)
    response.set_rate_limit(raw.rate_limit)
    return response


__all__ = [
    "EVENTS_ENDPOINT",
    "EVENT_INFO_ENDPOINT",
    "SEARCH_ENDPOINT",
    "PreparedCall",
    "prepare_events_call",
    "prepare_event_info_call",
    "prepare_search_call",
    "assemble_response",
]
