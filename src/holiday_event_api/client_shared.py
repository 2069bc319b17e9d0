"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import DEFAULT_BASE_URL, HolidayEventApiConfig
from .core.errors import HolidayEventApiConfigError


def validate_client_config(config: HolidayEventApiConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise HolidayEventApiConfigError(str(exc)) from exc


def resolve_client_config(
    *,
    api_key: str | None,
    base_url: str | None,
    config: HolidayEventApiConfig | None,
) -> HolidayEventApiConfig:
    if config is not None:
        if api_key is not None or base_url is not None:
            raise HolidayEventApiConfigError("pass either config or api_key/base_url, not both")
        resolved = config
    else:
        resolved = HolidayEventApiConfig(
            api_key=api_key or "",
            base_url=base_url if base_url is not None else DEFAULT_BASE_URL,
        )
    validate_client_config(resolved)
    return resolved


__all__ = [
    "validate_client_config",
    "resolve_client_config",
]
