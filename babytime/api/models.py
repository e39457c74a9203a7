"""Pydantic request/response models for all API endpoints."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime, date
from typing import Any, Dict, List, Optional, Literal


# Used by: FeedEventRequest / SleepEventRequest end_time validators
def _check_end_after_start(end_time, info):
    start_time = info.data.get('start_time')
    if end_time is None or start_time is None:
        return end_time
    if (end_time.tzinfo is None) != (start_time.tzinfo is None):
        raise ValueError('start_time and end_time must both carry a timezone offset or both omit it')
    if end_time < start_time:
        raise ValueError('end_time must not be before start_time')
    return end_time


# Request models

class BabyConfigRequest(BaseModel):
    name: str = ""
    birth_date: date
    bedtime_hour: Optional[int] = None  # falls back to DEFAULT_BEDTIME_HOUR
    bedtime_minute: Optional[int] = None
    custom_feed_interval_minutes: Optional[int] = Field(default=None, ge=0)
    dream_feed_enabled: bool = False
    dream_feed_hour: int = 22
    dream_feed_minute: int = 30

    @field_validator('bedtime_hour', 'dream_feed_hour')
    @classmethod
    def valid_hour(cls, v):
        if v is not None and not 0 <= v <= 23:
            raise ValueError('Hour must be between 0 and 23')
        return v

    @field_validator('bedtime_minute', 'dream_feed_minute')
    @classmethod
    def valid_minute(cls, v):
        if v is not None and not 0 <= v <= 59:
            raise ValueError('Minute must be between 0 and 59')
        return v


class FeedEventRequest(BaseModel):
    id: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    kind: Literal["bottle", "nursing"] = "bottle"
    source: Literal["breast_milk", "formula"] = "breast_milk"
    amount_oz: float = Field(default=0.0, ge=0)
    side: Literal["left", "right", "both"] = "both"

    @field_validator('end_time')
    @classmethod
    def ends_after_start(cls, v, info):
        return _check_end_after_start(v, info)


class SleepEventRequest(BaseModel):
    id: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None

    @field_validator('end_time')
    @classmethod
    def ends_after_start(cls, v, info):
        return _check_end_after_start(v, info)


class DayRequest(BaseModel):
    baby: BabyConfigRequest
    feeds: List[FeedEventRequest] = []
    sleeps: List[SleepEventRequest] = []
    wake_time: Optional[datetime] = None
    now: Optional[datetime] = None  # defaults to the server clock in DAY_TIMEZONE
    today_only: bool = True


# Age table models

class RangeResponse(BaseModel):
    min: int
    max: int


class AgeBracketResponse(BaseModel):
    label: str
    age_range_days: List[int]  # [lower, upper)
    typical_naps: RangeResponse
    wake_windows: List[RangeResponse]
    feed_interval_minutes: RangeResponse
    expected_feeds: RangeResponse
    nursing_oz_per_minute: float
    daily_intake_oz: RangeResponse
    daily_sleep_hours: RangeResponse


class AgeTableResponse(BaseModel):
    brackets: List[AgeBracketResponse]


# Snapshot models

class StateResponse(BaseModel):
    state: str  # "notStarted", "awakeEarly", ..., "feedingNow"
    detail: Dict[str, Any] = {}
    durations: Dict[str, str] = {}  # minute fields formatted as "1h 25m" / "45m"


class DaySnapshotResponse(BaseModel):
    generated_at: datetime
    day_state: StateResponse
    feed_state: StateResponse
    completed_naps: int
    total_feed_count: int
    nap_cutoff: datetime
    nap_cutoff_formatted: str
    bedtime: datetime
    bedtime_formatted: str
    age_description: str
    age_bracket: AgeBracketResponse
    feed_interval: RangeResponse
    wake_time: Optional[datetime] = None
    nursing_timer: Optional[str] = None  # "MM:SS" while nursing
    sleep_timer: Optional[str] = None  # "MM:SS" while asleep


# Summary models

class DailySummaryResponse(BaseModel):
    generated_at: datetime
    feed_count: int
    nap_count: int
    total_intake_oz: float
    total_intake_formatted: str
    average_oz_per_feed: Optional[float] = None
    average_oz_formatted: str
    total_sleep_minutes: int
    total_sleep_formatted: str
    longest_sleep_minutes: int
    longest_sleep_formatted: str
    minutes_since_last_feed: Optional[int] = None
    time_since_last_feed_formatted: str
    minutes_since_last_wake: Optional[int] = None
    awake_for_formatted: str
    next_feed_time: Optional[datetime] = None
    next_feed_time_formatted: str
    remaining_feeds: int
    remaining_oz: float
    offer_amount_oz: int
    dream_feed_time: Optional[datetime] = None
    recent_feeds: List[str]
    recent_sleeps: List[str]
