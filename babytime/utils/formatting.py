"""Display strings shared by the API responses: durations, timers, clock times."""

from datetime import datetime
from typing import Optional

from ..core.constants import DAYS_PER_MONTH, MINUTES_PER_HOUR
from ..services.events import FeedEvent, FeedKind, SleepEvent

PLACEHOLDER = "--"

_SOURCE_NAMES = {
    "breast_milk": "Breast milk",
    "formula": "Formula",
}


# Used by: api/day.py, daily_summary, describe_sleep
def format_duration(minutes: Optional[int]) -> str:
    """'1h 25m' from an hour up, '45m' below it."""
    if minutes is None:
        return PLACEHOLDER
    hours, remaining = divmod(minutes, MINUTES_PER_HOUR)
    if hours > 0:
        return f"{hours}h {remaining}m"
    return f"{minutes}m"


# Used by: api/day.py — running nursing / sleep timer
def format_timer(start: Optional[datetime], end: Optional[datetime], now: datetime) -> str:
    """MM:SS elapsed since start, frozen at end when set."""
    if start is None:
        return "00:00"
    reference = end or now
    elapsed = max(0, int((reference - start).total_seconds()))
    minutes, seconds = divmod(elapsed, 60)
    return f"{minutes:02d}:{seconds:02d}"


# Used by: api/day.py, daily_summary
def short_time(moment: Optional[datetime]) -> str:
    """'2:05 PM'."""
    if moment is None:
        return PLACEHOLDER
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def age_description(age_in_days: int) -> str:
    months = age_in_days // DAYS_PER_MONTH
    if months > 0:
        return f"{months} month{'' if months == 1 else 's'} old"
    return f"{age_in_days} day{'' if age_in_days == 1 else 's'} old"


def describe_feed(feed: FeedEvent) -> str:
    if feed.kind == FeedKind.BOTTLE:
        return f"{_SOURCE_NAMES[feed.source.value]} · {int(feed.amount_oz)} oz"
    return f"Nursing {feed.side.value} · {feed.duration_minutes or 0} min"


def describe_sleep(sleep: SleepEvent) -> str:
    if sleep.duration_minutes is None:
        return PLACEHOLDER
    return format_duration(sleep.duration_minutes)
