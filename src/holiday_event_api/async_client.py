"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

import httpx

from .client_shared import resolve_client_config
from .config import HolidayEventApiConfig
from .core.async_transport import AsyncTransport
from .core.errors import HolidayEventApiClosedError
from .events.async_service import AsyncEventsService
from .events.models import GetEventInfoResponse, GetEventsResponse, SearchResponse
from .events.requests import GetEventInfoRequest, GetEventsRequest, SearchRequest


class AsyncHolidayEventApi:
    """Public async Holiday and Event API client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        config: HolidayEventApiConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(api_key=api_key, base_url=base_url, config=config)
        self._transport = transport or AsyncTransport(self._config, http_transport=http_transport)
        self._events = AsyncEventsService(self._transport)
        self._closed = False

    @property
    def config(self) -> HolidayEventApiConfig:
        return self._config

    async def get_events(self, request: GetEventsRequest | None = None) -> GetEventsResponse:
        self._ensure_open()
        return await self._events.get_events(request or GetEventsRequest())

    async def get_event_info(self, request: GetEventInfoRequest) -> GetEventInfoResponse:
        self._ensure_open()
        return await self._events.get_event_info(request)

    async def search(self, request: SearchRequest) -> SearchResponse:
        self._ensure_open()
        return await self._events.search(request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise HolidayEventApiClosedError("AsyncHolidayEventApi is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncHolidayEventApi":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncHolidayEventApi",
]
