"""
Day API — stateless wrappers around the day engine.

Every request carries the baby profile and the day's events; nothing is stored.

Routes (/day):
  POST /snapshot               - Current day state + feed state for the supplied events
  POST /summary                - Today-so-far totals (intake, sleep, next feed)
  GET  /age-table              - All age brackets
  GET  /age-table/{age_days}   - Bracket that applies at a given age
"""

import logging
from dataclasses import fields
from datetime import datetime
from typing import List, Optional, Tuple

import pytz
from fastapi import APIRouter, HTTPException

from .models import (
    DayRequest,
    FeedEventRequest,
    SleepEventRequest,
    RangeResponse,
    AgeBracketResponse,
    AgeTableResponse,
    StateResponse,
    DaySnapshotResponse,
    DailySummaryResponse,
)
from ..core.settings import settings
from ..services import day_engine
from ..services.age_table import ALL_BRACKETS, AgeBracket, ClosedRange, for_age
from ..services.clock import TimeProvider
from ..services.daily_summary import build_daily_summary
from ..services.day_state import state_tag
from ..services.events import (
    BabyConfig, FeedEvent, SleepEvent, FeedKind, BottleSource, NursingSide,
)
from ..utils.day_events import events_for_day
from ..utils.formatting import (
    format_duration, format_timer, short_time, age_description,
    describe_feed, describe_sleep, PLACEHOLDER,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/day", tags=["day"])


# Used by: _resolve_inputs — every timestamp ends up aware, in DAY_TIMEZONE
def _to_local(moment: Optional[datetime], zone) -> Optional[datetime]:
    if moment is None:
        return None
    if moment.tzinfo is None:
        return zone.localize(moment)
    return moment.astimezone(zone)


def _range_response(r: ClosedRange) -> RangeResponse:
    return RangeResponse(min=r.lower, max=r.upper)


# Used by: age_table, age_bracket, snapshot
def _bracket_response(bracket: AgeBracket) -> AgeBracketResponse:
    return AgeBracketResponse(
        label=bracket.label,
        age_range_days=list(bracket.age_range_days),
        typical_naps=_range_response(bracket.typical_naps),
        wake_windows=[_range_response(ww) for ww in bracket.wake_windows],
        feed_interval_minutes=_range_response(bracket.feed_interval_minutes),
        expected_feeds=_range_response(bracket.expected_feeds),
        nursing_oz_per_minute=bracket.nursing_oz_per_minute,
        daily_intake_oz=_range_response(bracket.daily_intake_oz),
        daily_sleep_hours=_range_response(bracket.daily_sleep_hours),
    )


# Used by: snapshot — one tagged object per state case
def _state_response(state) -> StateResponse:
    detail = {}
    durations = {}
    for f in fields(state):
        value = getattr(state, f.name)
        if isinstance(value, ClosedRange):
            detail[f.name] = {"min": value.lower, "max": value.upper}
        else:
            detail[f.name] = value
            durations[f.name] = format_duration(value)
    return StateResponse(state=state_tag(state), detail=detail, durations=durations)


def _feed_event(req: FeedEventRequest, zone) -> FeedEvent:
    return FeedEvent(
        id=req.id,
        start_time=_to_local(req.start_time, zone),
        end_time=_to_local(req.end_time, zone),
        kind=FeedKind(req.kind),
        source=BottleSource(req.source),
        amount_oz=req.amount_oz,
        side=NursingSide(req.side),
    )


def _sleep_event(req: SleepEventRequest, zone) -> SleepEvent:
    return SleepEvent(
        id=req.id,
        start_time=_to_local(req.start_time, zone),
        end_time=_to_local(req.end_time, zone),
    )


# Used by: snapshot, summary
def _resolve_inputs(
        request: DayRequest,
) -> Tuple[BabyConfig, List[FeedEvent], List[SleepEvent], datetime, Optional[datetime]]:
    """Converts the request into engine inputs; rejects double-active events."""
    zone = pytz.timezone(settings.DAY_TIMEZONE)
    if request.now is None:
        now = TimeProvider.live(settings.DAY_TIMEZONE).now()
    else:
        now = _to_local(request.now, zone)

    b = request.baby
    baby = BabyConfig(
        name=b.name,
        birth_date=b.birth_date,
        bedtime_hour=b.bedtime_hour if b.bedtime_hour is not None else settings.DEFAULT_BEDTIME_HOUR,
        bedtime_minute=b.bedtime_minute if b.bedtime_minute is not None else settings.DEFAULT_BEDTIME_MINUTE,
        custom_feed_interval_minutes=b.custom_feed_interval_minutes,
        dream_feed_enabled=b.dream_feed_enabled,
        dream_feed_hour=b.dream_feed_hour,
        dream_feed_minute=b.dream_feed_minute,
    )

    feeds = [_feed_event(f, zone) for f in request.feeds]
    sleeps = [_sleep_event(s, zone) for s in request.sleeps]

    if request.today_only:
        feeds = events_for_day(feeds, now)
        sleeps = events_for_day(sleeps, now)

    # Checked on the events the engine will actually see
    if sum(1 for f in feeds if f.is_active_nursing) > 1:
        raise HTTPException(status_code=400, detail="Only one nursing session can be in progress")
    if sum(1 for s in sleeps if s.is_active) > 1:
        raise HTTPException(status_code=400, detail="Only one sleep can be in progress")

    return baby, feeds, sleeps, now, _to_local(request.wake_time, zone)


# Used by: caregiver home screen — polled on a timer tick
@router.post("/snapshot", response_model=DaySnapshotResponse)
async def snapshot(request: DayRequest):
    baby, feeds, sleeps, now, wake_time = _resolve_inputs(request)
    logger.info(
        f"Snapshot for {baby.name or 'baby'}: {len(feeds)} feeds, {len(sleeps)} sleeps at {now.isoformat()}"
    )

    snap = day_engine.snapshot(baby, feeds, sleeps, now=now, wake_time=wake_time)

    active_nursing = next((f for f in feeds if f.is_active_nursing), None)
    active_sleep = next((s for s in sleeps if s.is_active), None)

    return DaySnapshotResponse(
        generated_at=now,
        day_state=_state_response(snap.day_state),
        feed_state=_state_response(snap.feed_state),
        completed_naps=snap.completed_naps,
        total_feed_count=snap.total_feed_count,
        nap_cutoff=snap.nap_cutoff,
        nap_cutoff_formatted=short_time(snap.nap_cutoff),
        bedtime=snap.bedtime,
        bedtime_formatted=short_time(snap.bedtime),
        age_description=age_description(baby.age_in_days(now)),
        age_bracket=_bracket_response(snap.age_bracket),
        feed_interval=_range_response(snap.feed_interval),
        wake_time=snap.wake_time,
        nursing_timer=format_timer(active_nursing.start_time, None, now) if active_nursing else None,
        sleep_timer=format_timer(active_sleep.start_time, None, now) if active_sleep else None,
    )


# Used by: today summary card
@router.post("/summary", response_model=DailySummaryResponse)
async def summary(request: DayRequest):
    baby, feeds, sleeps, now, _ = _resolve_inputs(request)
    logger.info(f"Daily summary for {baby.name or 'baby'} at {now.isoformat()}")

    result = build_daily_summary(baby, feeds, sleeps, now)

    return DailySummaryResponse(
        generated_at=now,
        feed_count=result.feed_count,
        nap_count=result.nap_count,
        total_intake_oz=result.total_intake_oz,
        total_intake_formatted=f"{int(result.total_intake_oz)} oz",
        average_oz_per_feed=result.average_oz_per_feed,
        average_oz_formatted=(
            f"{result.average_oz_per_feed:.1f} oz" if result.average_oz_per_feed is not None else PLACEHOLDER
        ),
        total_sleep_minutes=result.total_sleep_minutes,
        total_sleep_formatted=format_duration(result.total_sleep_minutes),
        longest_sleep_minutes=result.longest_sleep_minutes,
        longest_sleep_formatted=(
            format_duration(result.longest_sleep_minutes) if result.longest_sleep_minutes > 0 else PLACEHOLDER
        ),
        minutes_since_last_feed=result.minutes_since_last_feed,
        time_since_last_feed_formatted=format_duration(result.minutes_since_last_feed),
        minutes_since_last_wake=result.minutes_since_last_wake,
        awake_for_formatted=format_duration(result.minutes_since_last_wake),
        next_feed_time=result.next_feed_time,
        next_feed_time_formatted=short_time(result.next_feed_time),
        remaining_feeds=result.remaining_feeds,
        remaining_oz=result.remaining_oz,
        offer_amount_oz=result.offer_amount_oz,
        dream_feed_time=result.dream_feed_time,
        recent_feeds=[describe_feed(f) for f in reversed(feeds)],
        recent_sleeps=[describe_sleep(s) for s in reversed(sleeps)],
    )


@router.get("/age-table", response_model=AgeTableResponse)
async def age_table():
    return AgeTableResponse(brackets=[_bracket_response(b) for b in ALL_BRACKETS])


@router.get("/age-table/{age_days}", response_model=AgeBracketResponse)
async def age_bracket(age_days: int):
    """Ages past the oldest bracket resolve to the oldest bracket."""
    return _bracket_response(for_age(age_days))
