"""Async HTTP transport with status evaluation and rate-limit capture."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import HolidayEventApiConfig
from .errors import (
    CLIENT_BUILD_FAILED_MESSAGE,
    HolidayEventApiConfigError,
    HolidayEventApiParseError,
    HolidayEventApiTransportError,
)
from .transport_shared import (
    HttpResponse,
    RawApiResult,
    build_default_headers,
    build_default_timeout,
    build_http_error,
    build_raw_result,
    is_success_status,
    normalize_base_url,
    normalize_endpoint,
)

logger = logging.getLogger("holiday_event_api")


class AsyncTransportClient(Protocol):
    async def get(self, url: str, *, params: Mapping[str, str]) -> HttpResponse: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Holiday and Event API."""

    def __init__(
        self,
        config: HolidayEventApiConfig,
        *,
        client: AsyncTransportClient | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or _build_client(config, http_transport)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def request(self, endpoint: str, *, params: Mapping[str, str]) -> RawApiResult:
        if self._closed:
            raise HolidayEventApiTransportError("transport is already closed")

        normalized_endpoint = normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s params=%s", normalized_endpoint, sorted(params))
        try:
            response = await self._client.get(normalized_endpoint, params=params)
        except httpx.RequestError as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise HolidayEventApiTransportError(str(exc) or exc.__class__.__name__) from exc

        http_status = response.status_code
        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            http_status,
        )
        if not is_success_status(http_status):
            error = build_http_error(response)
            logger.warning(
                "request failed endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise error

        try:
            result = build_raw_result(response)
        except HolidayEventApiParseError:
            logger.error(
                "response parse error endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise
        logger.info("request success endpoint=%s", normalized_endpoint)
        return result


def _build_client(
    config: HolidayEventApiConfig,
    http_transport: httpx.AsyncBaseTransport | None,
) -> httpx.AsyncClient:
    try:
        return httpx.AsyncClient(
            base_url=normalize_base_url(config.base_url),
            headers=build_default_headers(config),
            timeout=build_default_timeout(),
            follow_redirects=True,
            transport=http_transport,
        )
    except (TypeError, ValueError, httpx.InvalidURL) as exc:
        raise HolidayEventApiConfigError(CLIENT_BUILD_FAILED_MESSAGE) from exc


__all__ = [
    "AsyncTransport",
]
