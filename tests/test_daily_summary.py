from datetime import datetime

from babytime.services.daily_summary import build_daily_summary


def test_summary_totals(now, make_baby, make_feed, make_nursing, make_sleep):
    # 3-4 months: nursing at 0.2 oz/min, intake target 24...32 oz
    feeds = [make_feed(120, amount_oz=4.0), make_nursing(60, 20)]
    sleeps = [make_sleep(150, 40), make_sleep(60, 30)]

    summary = build_daily_summary(make_baby(90), feeds, sleeps, now)

    assert summary.feed_count == 2
    assert summary.nap_count == 2
    assert summary.total_intake_oz == 8.0
    assert summary.average_oz_per_feed == 4.0
    assert summary.total_sleep_minutes == 70
    assert summary.longest_sleep_minutes == 40
    assert summary.minutes_since_last_feed == 60
    assert summary.minutes_since_last_wake == 30
    # last feed at 1:00 PM + midpoint of 150...210
    assert summary.next_feed_time == datetime(2026, 2, 11, 16, 0)
    assert summary.remaining_feeds == 5
    assert summary.remaining_oz == 20.0
    assert summary.offer_amount_oz == 4


def test_summary_uses_custom_feed_interval(now, make_baby, make_feed):
    baby = make_baby(90, custom_feed_interval_minutes=120)
    summary = build_daily_summary(baby, [make_feed(60)], [], now)
    assert summary.next_feed_time == datetime(2026, 2, 11, 15, 0)


def test_empty_day(now, make_baby):
    summary = build_daily_summary(make_baby(90), [], [], now)
    assert summary.feed_count == 0
    assert summary.average_oz_per_feed is None
    assert summary.total_sleep_minutes == 0
    assert summary.longest_sleep_minutes == 0
    assert summary.minutes_since_last_feed is None
    assert summary.minutes_since_last_wake is None
    assert summary.next_feed_time is None
    assert summary.remaining_feeds == 7
    assert summary.remaining_oz == 28.0
    assert summary.offer_amount_oz == 4


def test_active_sleep_excluded_from_totals(now, make_baby, make_sleep, make_active_sleep):
    summary = build_daily_summary(make_baby(90), [], [make_sleep(200, 50), make_active_sleep(20)], now)
    assert summary.nap_count == 1
    assert summary.total_sleep_minutes == 50
    assert summary.minutes_since_last_wake == 150


def test_offer_amount_never_below_one(now, make_baby, make_feed):
    feeds = [make_feed(30 * i, amount_oz=5.0) for i in range(1, 9)]
    summary = build_daily_summary(make_baby(90), feeds, [], now)
    assert summary.remaining_oz == 0.0
    assert summary.remaining_feeds == 1
    assert summary.offer_amount_oz == 1


def test_to_dict_serializes_times(now, make_baby, make_feed):
    baby = make_baby(90, dream_feed_enabled=True)
    data = build_daily_summary(baby, [make_feed(60)], [], now).to_dict()
    assert data["next_feed_time"] == "2026-02-11T16:00:00"
    assert data["dream_feed_time"] == "2026-02-11T22:30:00"
