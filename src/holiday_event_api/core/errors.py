"""Error types raised by the Holiday and Event API client."""

from __future__ import annotations

INVALID_API_KEY_MESSAGE = (
    "Please provide a valid API key. "
    "Get one at https://apilayer.com/marketplace/checkiday-api#pricing."
)
INVALID_BASE_URL_MESSAGE = "Invalid base_url."
CLIENT_BUILD_FAILED_MESSAGE = "Error instantiating client."
EVENT_ID_REQUIRED_MESSAGE = "Event id is required."
SEARCH_QUERY_REQUIRED_MESSAGE = "Search query is required."

TRANSPORT_ERROR_PREFIX = "Can't process request: "
PARSE_ERROR_PREFIX = "Can't parse response: "


class HolidayEventApiError(Exception):
    """Base exception for this package.

    ``str(exc)`` is the human readable error value for every subclass.
    """

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


class HolidayEventApiConfigError(HolidayEventApiError):
    """Invalid client configuration."""


class HolidayEventApiValidationError(HolidayEventApiError):
    """Invalid request rejected before any network access."""


class HolidayEventApiClosedError(HolidayEventApiError):
    """Raised when client is used after close."""


class HolidayEventApiTransportError(HolidayEventApiError):
    """Network/transport-level failure."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"{TRANSPORT_ERROR_PREFIX}{cause}")
        self.cause = cause


class HolidayEventApiHttpError(HolidayEventApiError):
    """Non-success HTTP status."""

    def __init__(self, message: str, *, http_status: int) -> None:
        super().__init__(message, http_status=http_status)


class HolidayEventApiParseError(HolidayEventApiError):
    """Response body does not match the expected shape."""

    def __init__(self, detail: str, *, http_status: int | None = None) -> None:
        super().__init__(f"{PARSE_ERROR_PREFIX}{detail}", http_status=http_status)
        self.detail = detail


__all__ = [
    "INVALID_API_KEY_MESSAGE",
    "INVALID_BASE_URL_MESSAGE",
    "CLIENT_BUILD_FAILED_MESSAGE",
    "EVENT_ID_REQUIRED_MESSAGE",
    "SEARCH_QUERY_REQUIRED_MESSAGE",
    "TRANSPORT_ERROR_PREFIX",
    "PARSE_ERROR_PREFIX",
    "HolidayEventApiError",
    "HolidayEventApiConfigError",
    "HolidayEventApiValidationError",
    "HolidayEventApiClosedError",
    "HolidayEventApiTransportError",
    "HolidayEventApiHttpError",
    "HolidayEventApiParseError",
]
