"""Day state and feed state value types produced by the day engine.

Both tracks are closed unions: every snapshot carries exactly one DayState case
and one FeedState case. Cases are frozen dataclasses so they compare by value
and can be matched structurally:

    match snapshot.day_state:
        case AwakeBeyond(wake_minutes=mins):
            ...
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from .age_table import AgeBracket, ClosedRange


# ── DAY STATE ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NotStarted:
    """Nothing logged today and no wake time set."""


@dataclass(frozen=True)
class AwakeEarly:
    """Just woke up, early in the wake window."""
    wake_minutes: int
    window_range: ClosedRange


@dataclass(frozen=True)
class AwakeApproaching:
    """Inside the wake window; a nap is an option now."""
    wake_minutes: int
    window_range: ClosedRange


@dataclass(frozen=True)
class AwakeBeyond:
    """Past the wake window, may be getting overtired."""
    wake_minutes: int
    window_range: ClosedRange


@dataclass(frozen=True)
class SleepingNoPressure:
    """Napping, with plenty of time before the nap cutoff."""
    sleep_minutes: int
    minutes_until_cutoff: int


@dataclass(frozen=True)
class SleepingApproachingCutoff:
    """Napping, needs to wake soon to protect bedtime."""
    sleep_minutes: int
    minutes_until_cutoff: int


@dataclass(frozen=True)
class SleepingMustEnd:
    """Nap is running past the cutoff."""
    sleep_minutes: int
    minutes_past_cutoff: int


@dataclass(frozen=True)
class NapWindowClosed:
    """No more naps today, bridge to bedtime."""
    wake_minutes: int
    minutes_to_bedtime: int


@dataclass(frozen=True)
class BedtimeWindow:
    """Within 30 minutes of bedtime, or past it (minutes_to_bedtime is then 0)."""
    minutes_to_bedtime: int


DayState = Union[
    NotStarted,
    AwakeEarly,
    AwakeApproaching,
    AwakeBeyond,
    SleepingNoPressure,
    SleepingApproachingCutoff,
    SleepingMustEnd,
    NapWindowClosed,
    BedtimeWindow,
]


# ── FEED STATE ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NoFeedsYet:
    """No completed feed logged today."""


@dataclass(frozen=True)
class RecentlyFed:
    """Fed recently, well short of the feed interval."""
    minutes_ago: int


@dataclass(frozen=True)
class Approaching:
    """Past 80% of the interval minimum, next feed coming up."""
    minutes_ago: int
    interval_range: ClosedRange


@dataclass(frozen=True)
class Ready:
    """Within or past the feed interval."""
    minutes_ago: int
    interval_range: ClosedRange


@dataclass(frozen=True)
class FeedingNow:
    """A nursing session is in progress."""
    started_minutes_ago: int


FeedState = Union[NoFeedsYet, RecentlyFed, Approaching, Ready, FeedingNow]


# Used by: api/day.py — wire tag for each case
def state_tag(state: Union[DayState, FeedState]) -> str:
    name = type(state).__name__
    return name[0].lower() + name[1:]


@dataclass(frozen=True)
class DaySnapshot:
    day_state: DayState
    feed_state: FeedState
    completed_naps: int
    total_feed_count: int
    nap_cutoff: datetime
    bedtime: datetime
    age_bracket: AgeBracket
    feed_interval: ClosedRange
    wake_time: Optional[datetime] = None
