"""Event endpoints package."""

from .models import (
    AlternateName,
    Analytics,
    EventInfo,
    EventSummary,
    FounderInfo,
    GetEventInfoResponse,
    GetEventsResponse,
    ImageInfo,
    Occurrence,
    Pattern,
    RichText,
    SearchResponse,
    Tag,
)
from .requests import GetEventInfoRequest, GetEventsRequest, SearchRequest

__all__ = [
    "GetEventsRequest",
    "GetEventInfoRequest",
    "SearchRequest",
    "GetEventsResponse",
    "GetEventInfoResponse",
    "SearchResponse",
    "EventSummary",
    "EventInfo",
    "AlternateName",
    "ImageInfo",
    "RichText",
    "Pattern",
    "Occurrence",
    "FounderInfo",
    "Analytics",
    "Tag",
]
