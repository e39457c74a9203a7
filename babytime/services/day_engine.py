"""Pure day-state derivation: baby + today's events + current time → DaySnapshot.

No side effects, no persistence, no clock reads. Callers re-invoke on a tick.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from ..core.constants import (
    BEDTIME_WINDOW_MINUTES, NAP_CUTOFF_WARNING_MINUTES, FEED_APPROACHING_FACTOR,
)
from .age_table import AgeBracket, ClosedRange, for_age, current_wake_window
from .events import BabyConfig, FeedEvent, SleepEvent
from .day_state import (
    DaySnapshot, DayState, FeedState,
    NotStarted, AwakeEarly, AwakeApproaching, AwakeBeyond,
    SleepingNoPressure, SleepingApproachingCutoff, SleepingMustEnd,
    NapWindowClosed, BedtimeWindow,
    NoFeedsYet, RecentlyFed, Approaching, Ready, FeedingNow,
)


def _whole_minutes(start: datetime, end: datetime) -> int:
    """Minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


# Used by: api/day.py, daily_summary
def snapshot(
        baby: BabyConfig,
        feeds: Sequence[FeedEvent],
        sleeps: Sequence[SleepEvent],
        now: datetime,
        wake_time: Optional[datetime] = None,
) -> DaySnapshot:
    """Derive the current day state from inputs.

    Answers "given this baby's age, today's events, and the current time,
    what stage of the day is it, and is it time to feed?" Events are taken
    as-is; windowing them to today is the caller's job.
    """
    bracket = for_age(baby.age_in_days(now))
    bedtime = baby.bedtime_today(now)
    cutoff = nap_cutoff_time(bedtime, bracket.last_wake_window)

    completed_sleeps = [s for s in sleeps if s.end_time is not None]
    active_sleep = next((s for s in sleeps if s.end_time is None), None)
    completed_feeds = [f for f in feeds if f.is_completed]
    active_feed = next((f for f in feeds if f.is_active_nursing), None)

    nap_count = len(completed_sleeps)
    feed_count = len(completed_feeds) + (1 if active_feed is not None else 0)
    feed_interval = resolve_feed_interval(baby, bracket)

    day_state = derive_day_state(
        active_sleep=active_sleep,
        last_sleep_end=_latest_sleep_end(completed_sleeps),
        wake_time=wake_time,
        first_event_time=_earliest_event_time(feeds, sleeps),
        now=now,
        current_window=current_wake_window(bracket, nap_count),
        nap_cutoff=cutoff,
        bedtime=bedtime,
    )

    feed_state = derive_feed_state(
        active_feed=active_feed,
        last_completed_feed=_latest_completed_feed(completed_feeds),
        now=now,
        feed_interval=feed_interval,
    )

    return DaySnapshot(
        day_state=day_state,
        feed_state=feed_state,
        completed_naps=nap_count,
        total_feed_count=feed_count,
        nap_cutoff=cutoff,
        bedtime=bedtime,
        age_bracket=bracket,
        feed_interval=feed_interval,
        wake_time=wake_time,
    )


# Used by: snapshot
def nap_cutoff_time(bedtime: datetime, last_wake_window: ClosedRange) -> datetime:
    """Latest moment a nap may still be running: bedtime minus the last wake window's max."""
    return bedtime - timedelta(minutes=last_wake_window.upper)


# Used by: snapshot, daily_summary
def resolve_feed_interval(baby: BabyConfig, bracket: AgeBracket) -> ClosedRange:
    """A per-baby override beats the age default, as a single-value range."""
    custom = baby.custom_feed_interval_minutes
    if custom:
        return ClosedRange(custom, custom)
    return bracket.feed_interval_minutes


# Used by: snapshot
def derive_day_state(
        active_sleep: Optional[SleepEvent],
        last_sleep_end: Optional[datetime],
        wake_time: Optional[datetime],
        first_event_time: Optional[datetime],
        now: datetime,
        current_window: ClosedRange,
        nap_cutoff: datetime,
        bedtime: datetime,
) -> DayState:
    wake_reference = last_sleep_end or wake_time or first_event_time
    if wake_reference is None:
        return NotStarted()

    minutes_to_bedtime = _whole_minutes(now, bedtime)

    if active_sleep is not None:
        sleep_minutes = _whole_minutes(active_sleep.start_time, now)
        minutes_until_cutoff = _whole_minutes(now, nap_cutoff)

        if minutes_until_cutoff <= 0:
            return SleepingMustEnd(
                sleep_minutes=sleep_minutes,
                minutes_past_cutoff=abs(minutes_until_cutoff),
            )
        elif minutes_until_cutoff <= NAP_CUTOFF_WARNING_MINUTES:
            return SleepingApproachingCutoff(
                sleep_minutes=sleep_minutes,
                minutes_until_cutoff=minutes_until_cutoff,
            )
        return SleepingNoPressure(
            sleep_minutes=sleep_minutes,
            minutes_until_cutoff=minutes_until_cutoff,
        )

    wake_minutes = _whole_minutes(wake_reference, now)

    if 0 < minutes_to_bedtime <= BEDTIME_WINDOW_MINUTES:
        return BedtimeWindow(minutes_to_bedtime=minutes_to_bedtime)

    # Past bedtime
    if minutes_to_bedtime <= 0:
        return BedtimeWindow(minutes_to_bedtime=0)

    if now >= nap_cutoff:
        return NapWindowClosed(wake_minutes=wake_minutes, minutes_to_bedtime=minutes_to_bedtime)

    # Boundaries belong to "approaching" on both ends
    if wake_minutes < current_window.lower:
        return AwakeEarly(wake_minutes=wake_minutes, window_range=current_window)
    elif wake_minutes <= current_window.upper:
        return AwakeApproaching(wake_minutes=wake_minutes, window_range=current_window)
    return AwakeBeyond(wake_minutes=wake_minutes, window_range=current_window)


# Used by: snapshot
def derive_feed_state(
        active_feed: Optional[FeedEvent],
        last_completed_feed: Optional[FeedEvent],
        now: datetime,
        feed_interval: ClosedRange,
) -> FeedState:
    if active_feed is not None:
        return FeedingNow(started_minutes_ago=_whole_minutes(active_feed.start_time, now))

    if last_completed_feed is None:
        return NoFeedsYet()

    minutes_ago = _whole_minutes(last_completed_feed.start_time, now)
    approaching_threshold = int(feed_interval.lower * FEED_APPROACHING_FACTOR)

    if minutes_ago >= feed_interval.lower:
        return Ready(minutes_ago=minutes_ago, interval_range=feed_interval)
    elif minutes_ago >= approaching_threshold:
        return Approaching(minutes_ago=minutes_ago, interval_range=feed_interval)
    return RecentlyFed(minutes_ago=minutes_ago)


def _latest_sleep_end(completed_sleeps: Iterable[SleepEvent]) -> Optional[datetime]:
    ends = [s.end_time for s in completed_sleeps if s.end_time is not None]
    return max(ends) if ends else None


def _latest_completed_feed(completed_feeds: List[FeedEvent]) -> Optional[FeedEvent]:
    if not completed_feeds:
        return None
    return max(completed_feeds, key=lambda f: f.start_time)


def _earliest_event_time(
        feeds: Iterable[FeedEvent],
        sleeps: Iterable[SleepEvent],
) -> Optional[datetime]:
    starts = [f.start_time for f in feeds] + [s.start_time for s in sleeps]
    return min(starts) if starts else None
