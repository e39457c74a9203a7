"""Baby profile and logged feed/sleep events, as consumed by the day engine."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Optional


class FeedKind(str, Enum):
    BOTTLE = "bottle"
    NURSING = "nursing"


class BottleSource(str, Enum):
    BREAST_MILK = "breast_milk"
    FORMULA = "formula"


class NursingSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


def _minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() / 60)


# Used by: BabyConfig.bedtime_today, BabyConfig.dream_feed_today, utils/day_events.py
def at_clock_time(reference: datetime, hour: int, minute: int) -> datetime:
    """`hour:minute` on the calendar day of `reference`, in the same zone."""
    naive = datetime.combine(reference.date(), time(hour, minute))
    if reference.tzinfo is None:
        return naive
    # pytz zones need localize() to pick the right offset for that wall time
    localize = getattr(reference.tzinfo, "localize", None)
    if localize is not None:
        return localize(naive)
    return naive.replace(tzinfo=reference.tzinfo)


@dataclass(frozen=True)
class BabyConfig:
    """The slice of a baby profile the engine reads."""
    birth_date: date
    name: str = ""
    bedtime_hour: int = 19
    bedtime_minute: int = 0
    # 0 or None = use the age table's feed interval
    custom_feed_interval_minutes: Optional[int] = None
    dream_feed_enabled: bool = False
    dream_feed_hour: int = 22
    dream_feed_minute: int = 30

    def age_in_days(self, at: datetime) -> int:
        return (at.date() - self.birth_date).days

    def bedtime_today(self, reference: datetime) -> datetime:
        """Today's bedtime on the calendar day (and tz) of `reference`."""
        return at_clock_time(reference, self.bedtime_hour, self.bedtime_minute)

    def dream_feed_today(self, reference: datetime) -> Optional[datetime]:
        if not self.dream_feed_enabled:
            return None
        return at_clock_time(reference, self.dream_feed_hour, self.dream_feed_minute)


@dataclass(frozen=True)
class FeedEvent:
    start_time: datetime
    end_time: Optional[datetime] = None
    kind: FeedKind = FeedKind.BOTTLE
    source: BottleSource = BottleSource.BREAST_MILK
    amount_oz: float = 0.0
    side: NursingSide = NursingSide.BOTH
    id: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        # Bottles never run open-ended
        return self.kind == FeedKind.BOTTLE or self.end_time is not None

    @property
    def is_active_nursing(self) -> bool:
        return self.kind == FeedKind.NURSING and self.end_time is None

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.end_time is None:
            return None
        return max(0, _minutes_between(self.start_time, self.end_time))

    def estimated_oz(self, nursing_oz_per_minute: float) -> float:
        """Bottle volume, or nursing minutes times the age-based rate."""
        if self.kind == FeedKind.BOTTLE:
            return self.amount_oz
        return (self.duration_minutes or 0) * nursing_oz_per_minute


@dataclass(frozen=True)
class SleepEvent:
    start_time: datetime
    end_time: Optional[datetime] = None
    id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.end_time is None:
            return None
        return max(0, _minutes_between(self.start_time, self.end_time))
