"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .core.errors import INVALID_API_KEY_MESSAGE, INVALID_BASE_URL_MESSAGE

__version__ = "1.2.0"

DEFAULT_BASE_URL = "https://api.apilayer.com/checkiday/"
DEFAULT_USER_AGENT = f"HolidayApiPython/{__version__}"


def _is_header_safe(value: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


@dataclass(slots=True, frozen=True)
class HolidayEventApiConfig:
    """Runtime configuration for the Holiday and Event API client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT

    def __repr__(self) -> str:
        return (
            f"HolidayEventApiConfig(api_key='***', base_url={self.base_url!r}, "
            f"user_agent={self.user_agent!r})"
        )

    def validate(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key:
            raise ValueError(INVALID_API_KEY_MESSAGE)
        if not _is_header_safe(self.api_key):
            raise ValueError(INVALID_API_KEY_MESSAGE)
        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ValueError(INVALID_BASE_URL_MESSAGE) from exc
        if not url.is_absolute_url or not url.host:
            raise ValueError(INVALID_BASE_URL_MESSAGE)


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "HolidayEventApiConfig",
]
