"""Shared fixtures: a fixed reference time and event factories."""

from datetime import datetime, timedelta

import pytest

from babytime.services.events import (
    BabyConfig, FeedEvent, SleepEvent, FeedKind, NursingSide,
)

# Wednesday 2:00 PM; bedtime defaults to 7:00 PM the same day
REFERENCE_NOW = datetime(2026, 2, 11, 14, 0)


@pytest.fixture
def now():
    return REFERENCE_NOW


@pytest.fixture
def make_baby():
    def _make(age_days, reference=REFERENCE_NOW, bedtime_hour=19, bedtime_minute=0, **kwargs):
        return BabyConfig(
            name="Test",
            birth_date=(reference - timedelta(days=age_days)).date(),
            bedtime_hour=bedtime_hour,
            bedtime_minute=bedtime_minute,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_feed():
    """Completed feed that started `minutes_ago` and lasted 10 minutes."""
    def _make(minutes_ago, reference=REFERENCE_NOW, kind=FeedKind.BOTTLE, amount_oz=4.0, **kwargs):
        start = reference - timedelta(minutes=minutes_ago)
        return FeedEvent(
            start_time=start,
            end_time=start + timedelta(minutes=10),
            kind=kind,
            amount_oz=amount_oz,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_nursing():
    """Nursing session; active when `duration_minutes` is None."""
    def _make(started_minutes_ago, duration_minutes=None, reference=REFERENCE_NOW, side=NursingSide.BOTH):
        start = reference - timedelta(minutes=started_minutes_ago)
        end = start + timedelta(minutes=duration_minutes) if duration_minutes is not None else None
        return FeedEvent(start_time=start, end_time=end, kind=FeedKind.NURSING, side=side)
    return _make


@pytest.fixture
def make_sleep():
    def _make(started_minutes_ago, duration_minutes, reference=REFERENCE_NOW):
        start = reference - timedelta(minutes=started_minutes_ago)
        return SleepEvent(start_time=start, end_time=start + timedelta(minutes=duration_minutes))
    return _make


@pytest.fixture
def make_active_sleep():
    def _make(started_minutes_ago, reference=REFERENCE_NOW):
        return SleepEvent(start_time=reference - timedelta(minutes=started_minutes_ago))
    return _make
