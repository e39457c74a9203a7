"""Age bracket lookup with progressive wake windows."""

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from ..core.constants import (
    AGE_BRACKETS, NURSING_OZ_PER_MINUTE, DAILY_INTAKE_OZ, DAILY_SLEEP_HOURS,
)

logger = logging.getLogger(__name__)


class ClosedRange(NamedTuple):
    """Closed [lower, upper] range."""
    lower: int
    upper: int

    def contains(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2


# Used by: AgeBracket properties — first (upper_bound, value) row above the bracket's lower age
def _tiered_value(tiers: List[Tuple[Optional[int], object]], age_lower_bound: int):
    for upper_bound, value in tiers:
        if upper_bound is None or age_lower_bound < upper_bound:
            return value
    return tiers[-1][1]


@dataclass(frozen=True)
class AgeBracket:
    label: str
    age_range_days: Tuple[int, int]  # [lower, upper)
    typical_naps: ClosedRange
    wake_windows: Tuple[ClosedRange, ...]
    feed_interval_minutes: ClosedRange
    expected_feeds: ClosedRange

    def contains_age(self, age_in_days: int) -> bool:
        lower, upper = self.age_range_days
        return lower <= age_in_days < upper

    def current_wake_window(self, completed_naps: int) -> ClosedRange:
        """Wake window after `completed_naps` naps; clamps to the bedtime window."""
        index = min(completed_naps, len(self.wake_windows) - 1)
        return self.wake_windows[index]

    @property
    def last_wake_window(self) -> ClosedRange:
        return self.wake_windows[-1]

    @property
    def nursing_oz_per_minute(self) -> float:
        return _tiered_value(NURSING_OZ_PER_MINUTE, self.age_range_days[0])

    @property
    def daily_intake_oz(self) -> ClosedRange:
        return ClosedRange(*_tiered_value(DAILY_INTAKE_OZ, self.age_range_days[0]))

    @property
    def daily_sleep_hours(self) -> ClosedRange:
        return ClosedRange(*_tiered_value(DAILY_SLEEP_HOURS, self.age_range_days[0]))


# Used by: module load — builds ALL_BRACKETS from the constants table
def _build_bracket(row: dict) -> AgeBracket:
    return AgeBracket(
        label=row["label"],
        age_range_days=tuple(row["age_range_days"]),
        typical_naps=ClosedRange(*row["typical_naps"]),
        wake_windows=tuple(ClosedRange(*ww) for ww in row["wake_windows"]),
        feed_interval_minutes=ClosedRange(*row["feed_interval_minutes"]),
        expected_feeds=ClosedRange(*row["expected_feeds"]),
    )


ALL_BRACKETS: Tuple[AgeBracket, ...] = tuple(_build_bracket(row) for row in AGE_BRACKETS)


# Used by: day_engine.snapshot, daily_summary, api/day.py (age table endpoints)
def for_age(age_in_days: int) -> AgeBracket:
    """First bracket containing the age; the oldest bracket for anything else."""
    for bracket in ALL_BRACKETS:
        if bracket.contains_age(age_in_days):
            return bracket
    logger.debug(f"Age {age_in_days}d outside the table, using {ALL_BRACKETS[-1].label}")
    return ALL_BRACKETS[-1]


# Used by: day_engine.snapshot
def current_wake_window(bracket: AgeBracket, completed_naps: int) -> ClosedRange:
    return bracket.current_wake_window(completed_naps)
