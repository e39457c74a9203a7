"""Windows a baby's logged events down to one calendar day."""

import logging
from datetime import datetime
from typing import List, Sequence, TypeVar, Union

from ..services.events import FeedEvent, SleepEvent, at_clock_time

logger = logging.getLogger(__name__)

Event = TypeVar("Event", bound=Union[FeedEvent, SleepEvent])


# Used by: api/day.py (today_only requests)
def events_for_day(events: Sequence[Event], now: datetime) -> List[Event]:
    """Events that started on or after the start of `now`'s day, oldest first.

    Events still running from before midnight are dropped, the same as
    anything logged yesterday.
    """
    if not events:
        return []

    start_of_day = at_clock_time(now, 0, 0)
    todays = sorted(
        (e for e in events if e.start_time >= start_of_day),
        key=lambda e: e.start_time,
    )
    dropped = len(events) - len(todays)
    if dropped:
        logger.debug(f"Dropped {dropped} events from before {start_of_day.isoformat()}")
    return todays
