"""Today-so-far totals for the summary card: intake, sleep, and next-feed hints."""

import logging
import math
from dataclasses import dataclass, asdict
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence

from ..core.constants import TARGET_FEEDS_PER_DAY
from .age_table import for_age
from .day_engine import resolve_feed_interval
from .events import BabyConfig, FeedEvent, SleepEvent

logger = logging.getLogger(__name__)


@dataclass
class DailySummary:
    feed_count: int
    nap_count: int
    total_intake_oz: float
    average_oz_per_feed: Optional[float]
    total_sleep_minutes: int
    longest_sleep_minutes: int
    minutes_since_last_feed: Optional[int]
    minutes_since_last_wake: Optional[int]
    next_feed_time: Optional[datetime]
    remaining_feeds: int
    remaining_oz: float
    offer_amount_oz: int
    dream_feed_time: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("next_feed_time", "dream_feed_time"):
            if data[key]:
                data[key] = data[key].isoformat()
        return data


def _minutes_since(moment: datetime, now: datetime) -> int:
    return int((now - moment).total_seconds() / 60)


# Used by: build_daily_summary
def _latest(events: Sequence, key) -> Optional[Any]:
    return max(events, key=key) if events else None


# Used by: api/day.py (POST /day/summary)
def build_daily_summary(
        baby: BabyConfig,
        feeds: Sequence[FeedEvent],
        sleeps: Sequence[SleepEvent],
        now: datetime,
) -> DailySummary:
    """Summarize the day's feeds and sleeps against the baby's age targets."""
    bracket = for_age(baby.age_in_days(now))

    feed_count = len(feeds)
    total_oz = sum(f.estimated_oz(bracket.nursing_oz_per_minute) for f in feeds)

    completed_sleeps: List[SleepEvent] = [s for s in sleeps if s.end_time is not None]
    durations = [s.duration_minutes for s in completed_sleeps]

    last_feed = _latest(feeds, key=lambda f: f.start_time)
    last_sleep = _latest(completed_sleeps, key=lambda s: s.start_time)

    next_feed_time = None
    if last_feed is not None:
        interval = resolve_feed_interval(baby, bracket)
        next_feed_time = last_feed.start_time + timedelta(minutes=interval.midpoint)

    remaining_feeds = max(1, TARGET_FEEDS_PER_DAY - feed_count)
    remaining_oz = max(0.0, bracket.daily_intake_oz.midpoint - total_oz)
    # Round half up; remaining_oz is never negative
    offer_amount = max(1, int(math.floor(remaining_oz / remaining_feeds + 0.5)))

    summary = DailySummary(
        feed_count=feed_count,
        nap_count=len(completed_sleeps),
        total_intake_oz=round(total_oz, 2),
        average_oz_per_feed=round(total_oz / feed_count, 1) if feed_count else None,
        total_sleep_minutes=sum(durations),
        longest_sleep_minutes=max(durations, default=0),
        minutes_since_last_feed=_minutes_since(last_feed.start_time, now) if last_feed else None,
        minutes_since_last_wake=_minutes_since(last_sleep.end_time, now) if last_sleep else None,
        next_feed_time=next_feed_time,
        remaining_feeds=remaining_feeds,
        remaining_oz=round(remaining_oz, 2),
        offer_amount_oz=offer_amount,
        dream_feed_time=baby.dream_feed_today(now),
    )

    logger.debug(
        f"Summary for {baby.name or 'baby'} ({bracket.label}): "
        f"{feed_count} feeds, {total_oz:.1f} oz, {summary.total_sleep_minutes} min asleep"
    )
    return summary
