"""Rate-limit metadata carried alongside decoded responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

RATE_LIMIT_MONTH_HEADER = "x-ratelimit-limit-month"
RATE_LIMIT_REMAINING_MONTH_HEADER = "x-ratelimit-remaining-month"


@dataclass(slots=True, frozen=True)
class RateLimit:
    """Monthly quota reported by the API. Reported only, never enforced."""

    limit_month: int = 0
    remaining_month: int = 0


class RateLimited(Protocol):
    """Responses that accept header-derived rate-limit data after decoding."""

    @property
    def rate_limit(self) -> RateLimit: ...

    def set_rate_limit(self, rate_limit: RateLimit) -> None: ...


class RateLimitedMixin:
    """``set_rate_limit`` for frozen response dataclasses with a ``rate_limit`` field."""

    __slots__ = ()

    def set_rate_limit(self, rate_limit: RateLimit) -> None:
        object.__setattr__(self, "rate_limit", rate_limit)


_INT32_MAX = 2**31 - 1


def _to_int(value: str | None) -> int:
    """Signed 32-bit decimal with an optional sign; anything else, or a negative, is 0."""

    if value is None:
        return 0
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        return 0
    number = int(value)
    if number < 0 or number > _INT32_MAX:
        return 0
    return number


def rate_limit_from_headers(headers: Mapping[str, str]) -> RateLimit:
    """Read the monthly rate-limit headers. Lookup must be case-insensitive."""

    return RateLimit(
        limit_month=_to_int(headers.get(RATE_LIMIT_MONTH_HEADER)),
        remaining_month=_to_int(headers.get(RATE_LIMIT_REMAINING_MONTH_HEADER)),
    )


__all__ = [
    "RATE_LIMIT_MONTH_HEADER",
    "RATE_LIMIT_REMAINING_MONTH_HEADER",
    "RateLimit",
    "RateLimited",
    "RateLimitedMixin",
    "rate_limit_from_headers",
]
