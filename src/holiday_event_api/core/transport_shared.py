"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import platform
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from ..config import HolidayEventApiConfig
from .errors import HolidayEventApiHttpError
from .models import RateLimit, rate_limit_from_headers
from .response_parsing import parse_json_payload, resolve_error_message

API_KEY_HEADER = "apikey"
PLATFORM_VERSION_HEADER = "X-Platform-Version"
# applies to each phase (connect, read, write, pool), not to the whole request
TIMEOUT_SECONDS = 10.0


class HttpResponse(Protocol):
    status_code: int
    headers: Mapping[str, str]

    def json(self) -> object: ...


@dataclass(slots=True, frozen=True)
class RawApiResult:
    """Decoded JSON body plus rate-limit data read from the response headers."""

    payload: dict[str, object]
    rate_limit: RateLimit


def build_default_headers(config: HolidayEventApiConfig) -> Mapping[str, str]:
    return {
        API_KEY_HEADER: config.api_key,
        "User-Agent": config.user_agent,
        PLATFORM_VERSION_HEADER: platform.python_version(),
    }


def build_default_timeout() -> httpx.Timeout:
    return httpx.Timeout(TIMEOUT_SECONDS)


def normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/") + "/"


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.lstrip("/")


def is_success_status(http_status: int) -> bool:
    return 200 <= http_status < 300


def build_http_error(response: HttpResponse) -> HolidayEventApiHttpError:
    http_status = response.status_code
    return HolidayEventApiHttpError(
        resolve_error_message(response, http_status=http_status),
        http_status=http_status,
    )


def build_raw_result(response: HttpResponse) -> RawApiResult:
    # headers first; the body may fail to decode
    rate_limit = rate_limit_from_headers(response.headers)
    payload = parse_json_payload(response, http_status=response.status_code)
    return RawApiResult(payload=payload, rate_limit=rate_limit)


__all__ = [
    "API_KEY_HEADER",
    "PLATFORM_VERSION_HEADER",
    "TIMEOUT_SECONDS",
    "HttpResponse",
    "RawApiResult",
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "normalize_endpoint",
    "is_success_status",
    "build_http_error",
    "build_raw_result",
]
