import pytest

from babytime.services.age_table import (
    ALL_BRACKETS, ClosedRange, for_age, current_wake_window,
)


@pytest.mark.parametrize("age_days", [0, 15, 30, 60, 90, 120, 150, 180, 210, 270, 300, 365, 400])
def test_every_bracket_is_usable(age_days):
    bracket = for_age(age_days)
    assert len(bracket.wake_windows) >= 2
    assert bracket.feed_interval_minutes.lower > 0
    assert bracket.expected_feeds.lower > 0
    assert bracket.typical_naps.lower >= 1


@pytest.mark.parametrize("age_days", [0, 45, 90, 150, 250, 350, 419])
def test_lookup_contains_age(age_days):
    lower, upper = for_age(age_days).age_range_days
    assert lower <= age_days < upper


@pytest.mark.parametrize("age_days", [420, 500, 10_000, -1])
def test_ages_outside_table_use_oldest_bracket(age_days):
    assert for_age(age_days) is ALL_BRACKETS[-1]


def test_wake_windows_are_progressive():
    for bracket in ALL_BRACKETS:
        for current, following in zip(bracket.wake_windows, bracket.wake_windows[1:]):
            assert following.lower >= current.lower, bracket.label
            assert following.upper >= current.upper, bracket.label


def test_brackets_are_contiguous_from_day_zero():
    assert ALL_BRACKETS[0].age_range_days[0] == 0
    for current, following in zip(ALL_BRACKETS, ALL_BRACKETS[1:]):
        assert current.age_range_days[1] == following.age_range_days[0]


def test_current_wake_window_clamps_to_last():
    bracket = for_age(90)
    assert bracket.current_wake_window(99) == bracket.last_wake_window


@pytest.mark.parametrize("age_days", [15, 90, 150, 250, 350])
def test_clamping_is_idempotent(age_days):
    bracket = for_age(age_days)
    last_index = len(bracket.wake_windows) - 1
    expected = current_wake_window(bracket, last_index)
    for naps in range(last_index, last_index + 5):
        assert current_wake_window(bracket, naps) == expected


def test_wake_window_indexed_by_completed_naps():
    bracket = for_age(90)
    assert current_wake_window(bracket, 0) == ClosedRange(75, 90)
    assert current_wake_window(bracket, 1) == ClosedRange(90, 105)
    assert current_wake_window(bracket, 3) == ClosedRange(105, 120)


def test_newborn_windows_are_flat():
    bracket = for_age(15)
    assert set(bracket.wake_windows) == {ClosedRange(45, 60)}


def test_five_month_bracket_has_four_windows():
    bracket = for_age(150)
    assert bracket.label == "5-7 months"
    assert len(bracket.wake_windows) == 4


@pytest.mark.parametrize("age_days, label", [
    (0, "0-2 months"),
    (59, "0-2 months"),
    (60, "3-4 months"),
    (119, "3-4 months"),
    (120, "5-7 months"),
    (209, "5-7 months"),
    (210, "8-10 months"),
    (299, "8-10 months"),
    (300, "11-14 months"),
    (419, "11-14 months"),
])
def test_bracket_boundaries(age_days, label):
    assert for_age(age_days).label == label


@pytest.mark.parametrize("age_days, rate", [(0, 0.1), (30, 0.1), (90, 0.2), (350, 0.2)])
def test_nursing_rate(age_days, rate):
    assert for_age(age_days).nursing_oz_per_minute == rate


@pytest.mark.parametrize("age_days, intake, sleep_hours", [
    (0, (14, 28), (14, 17)),
    (90, (24, 32), (14, 17)),
    (150, (24, 36), (12, 16)),
    (250, (24, 32), (12, 15)),
    (350, (20, 28), (12, 15)),
])
def test_daily_targets(age_days, intake, sleep_hours):
    bracket = for_age(age_days)
    assert bracket.daily_intake_oz == intake
    assert bracket.daily_sleep_hours == sleep_hours


def test_closed_range_includes_both_ends():
    r = ClosedRange(90, 105)
    assert r.contains(90)
    assert r.contains(105)
    assert not r.contains(106)
    assert r.midpoint == 97.5
