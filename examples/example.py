"""Walk through the three operations against the live API.

Get a free API key from https://apilayer.com/marketplace/checkiday-api#pricing
and export it as HOLIDAY_EVENT_API_KEY.
"""

from __future__ import annotations

import logging
import os
import sys

from holiday_event_api import (
    GetEventInfoRequest,
    GetEventsRequest,
    HolidayEventApi,
    HolidayEventApiError,
    SearchRequest,
)


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))
    try:
        client = HolidayEventApi(os.getenv("HOLIDAY_EVENT_API_KEY", ""))
    except HolidayEventApiError as exc:
        print(exc)
        return 1

    with client:
        try:
            # These parameters are all optional. These are their defaults:
            events = client.get_events(
                GetEventsRequest(date="today", adult=False, timezone="America/Chicago")
            )
            event = events.events[0]
            print(f"Today is {event.name}! Find more information at: {event.url}.")
            print(
                "Rate limit remaining: "
                f"{events.rate_limit.remaining_month}/{events.rate_limit.limit_month} (month)."
            )

            # start/end bound the range of event_info.event.occurrences
            event_info = client.get_event_info(GetEventInfoRequest(id=event.id))
            print(f"The Event's hashtags are {event_info.event.hashtags}.")

            query = "pizza day"
            search = client.search(SearchRequest(query=query))
            print(
                f"Found {len(search.events)} events, including {search.events[0].name}, "
                f'that match the query "{query}".'
            )
        except HolidayEventApiError as exc:
            print(exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
