from datetime import datetime

from babytime.services.clock import TimeProvider
from babytime.services.day_engine import snapshot
from babytime.services.day_state import AwakeEarly


def test_fixed_clock_replays_same_moment(now):
    clock = TimeProvider.fixed(now)
    assert clock.now() == now
    assert clock.now() == now


def test_live_clock_is_zone_aware():
    moment = TimeProvider.live("America/New_York").now()
    assert moment.tzinfo is not None
    assert moment.tzinfo.zone == "America/New_York"


def test_engine_driven_by_fixed_clock(make_baby, make_sleep):
    clock = TimeProvider.fixed(datetime(2026, 2, 11, 14, 0))
    snap = snapshot(make_baby(90), [], [make_sleep(60, 30)], now=clock.now())
    assert isinstance(snap.day_state, AwakeEarly)
