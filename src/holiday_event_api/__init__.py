"""Public package exports for the Holiday and Event API client."""

from .async_client import AsyncHolidayEventApi
from .client import HolidayEventApi
from .config import HolidayEventApiConfig, __version__
from .core.date_or_timestamp import DateOrTimestamp, DateValue, TimestampValue
from .core.errors import (
    HolidayEventApiClosedError,
    HolidayEventApiConfigError,
    HolidayEventApiError,
    HolidayEventApiHttpError,
    HolidayEventApiParseError,
    HolidayEventApiTransportError,
    HolidayEventApiValidationError,
)
from .core.models import RateLimit
from .events.requests import GetEventInfoRequest, GetEventsRequest, SearchRequest

__all__ = [
    "__version__",
    "HolidayEventApi",
    "AsyncHolidayEventApi",
    "HolidayEventApiConfig",
    "GetEventsRequest",
    "GetEventInfoRequest",
    "SearchRequest",
    "RateLimit",
    "DateOrTimestamp",
    "DateValue",
    "TimestampValue",
    "HolidayEventApiError",
    "HolidayEventApiConfigError",
    "HolidayEventApiValidationError",
    "HolidayEventApiClosedError",
    "HolidayEventApiTransportError",
    "HolidayEventApiHttpError",
    "HolidayEventApiParseError",
]
