"""Shared response body helpers for sync/async transports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx

from .errors import HolidayEventApiParseError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Decode a success body and map decode failures to parse errors."""

    try:
        payload = response.json()
    except (ValueError, RecursionError) as exc:
        raise HolidayEventApiParseError(
            str(exc) or exc.__class__.__name__,
            http_status=http_status,
        ) from exc

    if not isinstance(payload, dict):
        raise HolidayEventApiParseError(
            f"expected a JSON object, got {type(payload).__name__}",
            http_status=http_status,
        )
    return payload


def _flat_error_map(response: JsonPayloadResponse) -> Mapping[str, str] | None:
    try:
        payload = response.json()
    except (ValueError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None
    if any(not isinstance(value, str) for value in payload.values()):
        return None
    return payload


def resolve_error_message(response: JsonPayloadResponse, *, http_status: int) -> str:
    """Pick the message for a non-success status.

    Priority: the API's ``error`` field, then the canonical reason phrase,
    then the bare status code.
    """

    error_map = _flat_error_map(response)
    if error_map is not None and error_map.get("error"):
        return error_map["error"]
    return httpx.codes.get_reason_phrase(http_status) or str(http_status)


__all__ = [
    "parse_json_payload",
    "resolve_error_message",
]
