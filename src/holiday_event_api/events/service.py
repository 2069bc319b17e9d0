"""Event operations executed over the sync transport."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..core.errors import HolidayEventApiParseError
from ..core.models import RateLimited
from ..core.transport import SyncTransport
from .models import GetEventInfoResponse, GetEventsResponse, SearchResponse
from .requests import GetEventInfoRequest, GetEventsRequest, SearchRequest
from .service_shared import (
    PreparedCall,
    assemble_response,
    prepare_event_info_call,
    prepare_events_call,
    prepare_search_call,
)

logger = logging.getLogger("holiday_event_api")

R = TypeVar("R", bound=RateLimited)


class EventsService:
    """Single-request executor for the event endpoints."""

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def get_events(self, request: GetEventsRequest) -> GetEventsResponse:
        return self._execute(prepare_events_call(request))

    def get_event_info(self, request: GetEventInfoRequest) -> GetEventInfoResponse:
        return self._execute(prepare_event_info_call(request))

    def search(self, request: SearchRequest) -> SearchResponse:
        return self._execute(prepare_search_call(request))

    def _execute(self, call: PreparedCall[R]) -> R:
        raw = self._transport.request(call.endpoint, params=call.params)
        try:
            return assemble_response(call, raw)
        except HolidayEventApiParseError:
            logger.error("response shape mismatch endpoint=%s", call.endpoint)
            raise


__all__ = [
    "EventsService",
]
