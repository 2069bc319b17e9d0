"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

import httpx

from .client_shared import resolve_client_config
from .config import HolidayEventApiConfig
from .core.errors import HolidayEventApiClosedError
from .core.transport import SyncTransport
from .events.models import GetEventInfoResponse, GetEventsResponse, SearchResponse
from .events.requests import GetEventInfoRequest, GetEventsRequest, SearchRequest
from .events.service import EventsService


class HolidayEventApi:
    """Public Holiday and Event API client.

    Configuration is fixed at construction; one instance can be shared by
    callers. Nothing is cached or retried.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        config: HolidayEventApiConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(api_key=api_key, base_url=base_url, config=config)
        self._transport = transport or SyncTransport(self._config, http_transport=http_transport)
        self._events = EventsService(self._transport)
        self._closed = False

    @property
    def config(self) -> HolidayEventApiConfig:
        return self._config

    def get_events(self, request: GetEventsRequest | None = None) -> GetEventsResponse:
        """Gets the events for the provided date."""

        self._ensure_open()
        return self._events.get_events(request or GetEventsRequest())

    def get_event_info(self, request: GetEventInfoRequest) -> GetEventInfoResponse:
        """Gets the event info for the provided event."""

        self._ensure_open()
        return self._events.get_event_info(request)

    def search(self, request: SearchRequest) -> SearchResponse:
        """Searches for events with the given criteria."""

        self._ensure_open()
        return self._events.search(request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise HolidayEventApiClosedError("HolidayEventApi is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "HolidayEventApi":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "HolidayEventApi",
]
