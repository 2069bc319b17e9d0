"""Event operations executed over the async transport."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..core.async_transport import AsyncTransport
from ..core.errors import HolidayEventApiParseError
from ..core.models import RateLimited
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


class AsyncEventsService:
    """Single-request async executor for the event endpoints."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def get_events(self, request: GetEventsRequest) -> GetEventsResponse:
        return await self._execute(prepare_events_call(request))

    async def get_event_info(self, request: GetEventInfoRequest) -> GetEventInfoResponse:
        return await self._execute(prepare_event_info_call(request))

    async def search(self, request: SearchRequest) -> SearchResponse:
        return await self._execute(prepare_search_call(request))

    async def _execute(self, call: PreparedCall[R]) -> R:
        raw = await self._transport.request(call.endpoint, params=call.params)
        try:
            return assemble_response(call, raw)
        except HolidayEventApiParseError:
            logger.error("response shape mismatch endpoint=%s", call.endpoint)
            raise


__all__ = [
    "AsyncEventsService",
]
