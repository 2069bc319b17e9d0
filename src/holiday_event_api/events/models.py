"""Event domain and response models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.date_or_timestamp import DateOrTimestamp
from ..core.models import RateLimit, RateLimitedMixin


def _freeze(instance: object, *names: str) -> None:
    for name in names:
        value = getattr(instance, name)
        if value is None or isinstance(value, tuple):
            continue
        object.__setattr__(instance, name, tuple(value))


@dataclass(slots=True, frozen=True)
class EventSummary:
    id: str
    name: str
    url: str


@dataclass(slots=True, frozen=True)
class AlternateName:
    name: str
    first_year: int | None = None
    last_year: int | None = None


@dataclass(slots=True, frozen=True)
class ImageInfo:
    small: str
    medium: str
    large: str


@dataclass(slots=True, frozen=True)
class RichText:
    """Same content as plain text, HTML and Markdown; each form may be missing."""

    text: str | None = None
    html: str | None = None
    markdown: str | None = None


@dataclass(slots=True, frozen=True)
class Pattern:
    observed: str
    observed_html: str
    observed_markdown: str
    length: int
    first_year: int | None = None
    last_year: int | None = None


@dataclass(slots=True, frozen=True)
class Occurrence:
    date: DateOrTimestamp
    length: int


@dataclass(slots=True, frozen=True)
class FounderInfo:
    name: str
    url: str | None = None
    date: str | None = None


@dataclass(slots=True, frozen=True)
class Analytics:
    overall_rank: int
    social_rank: int
    social_shares: int
    popularity: str


@dataclass(slots=True, frozen=True)
class Tag:
    name: str


@dataclass(slots=True, frozen=True)
class EventInfo:
    """Full event details.

    Every field after ``alternate_names`` depends on the API plan; ``None``
    means the plan did not include it.
    """

    id: str
    name: str
    url: str
    adult: bool
    alternate_names: tuple[AlternateName, ...] | list[AlternateName] = ()
    hashtags: tuple[str, ...] | list[str] | None = None
    image: ImageInfo | None = None
    sources: tuple[str, ...] | list[str] | None = None
    description: RichText | None = None
    how_to_observe: RichText | None = None
    patterns: tuple[Pattern, ...] | list[Pattern] | None = None
    occurrences: tuple[Occurrence, ...] | list[Occurrence] | None = None
    founders: tuple[FounderInfo, ...] | list[FounderInfo] | None = None
    analytics: Analytics | None = None
    tags: tuple[Tag, ...] | list[Tag] | None = None

    def __post_init__(self) -> None:
        _freeze(
            self,
            "alternate_names",
            "hashtags",
            "sources",
            "patterns",
            "occurrences",
            "founders",
            "tags",
        )


@dataclass(slots=True, frozen=True)
class GetEventsResponse(RateLimitedMixin):
    adult: bool
    date: DateOrTimestamp
    timezone: str
    events: tuple[EventSummary, ...] | list[EventSummary]
    multiday_starting: tuple[EventSummary, ...] | list[EventSummary] = ()
    multiday_ongoing: tuple[EventSummary, ...] | list[EventSummary] = ()
    rate_limit: RateLimit = field(default_factory=RateLimit, kw_only=True)

    def __post_init__(self) -> None:
        _freeze(self, "events", "multiday_starting", "multiday_ongoing")


@dataclass(slots=True, frozen=True)
class GetEventInfoResponse(RateLimitedMixin):
    event: EventInfo
    rate_limit: RateLimit = field(default_factory=RateLimit, kw_only=True)


@dataclass(slots=True, frozen=True)
class SearchResponse(RateLimitedMixin):
    query: str
    adult: bool
    events: tuple[EventSummary, ...] | list[EventSummary]
    rate_limit: RateLimit = field(default_factory=RateLimit, kw_only=True)

    def __post_init__(self) -> None:
        _freeze(self, "events")


__all__ = [
    "EventSummary",
    "AlternateName",
    "ImageInfo",
    "RichText",
    "Pattern",
    "Occurrence",
    "FounderInfo",
    "Analytics",
    "Tag",
    "EventInfo",
    "GetEventsResponse",
    "GetEventInfoResponse",
    "SearchResponse",
]
