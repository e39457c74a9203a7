"""Age-based day targets, state thresholds, and app-level tuning constants."""

# ── AGE BRACKETS ─────────────────────────────────────────────────────────────
# Progressive wake windows per age bracket, in minutes.
# Index = number of naps completed today. The last entry doubles as the
# bedtime wake window and is reused once the explicit list runs out.
#
# | Age      | Naps | WW1       | WW2       | WW3       | WW4       | Last WW   |
# |----------|------|-----------|-----------|-----------|-----------|-----------|
# | 0-2 mo   | 4-5  | 45-60m    | 45-60m    | 45-60m    | 45-60m    | 45-60m    |
# | 3-4 mo   | 3-4  | 75-90m    | 90-105m   | 90-105m   | 105-120m  | 105-120m  |
# | 5-7 mo   | 2-3  | 105-150m  | 120-165m  | 135-180m  | -         | 150-180m  |
# | 8-10 mo  | 2    | 150-180m  | 180-210m  | -         | -         | 180-240m  |
# | 11-14 mo | 1-2  | 180-240m  | 210-270m  | -         | -         | 210-270m  |
#
# NOTE: Ranges are rounded parenting heuristics, not clinical cutoffs. Age
# ranges are half-open [lower, upper) in days and must stay contiguous.
AGE_BRACKETS = [
    {
        "label": "0-2 months",
        "age_range_days": (0, 60),
        "typical_naps": (4, 5),
        "wake_windows": [(45, 60), (45, 60), (45, 60), (45, 60), (45, 60)],
        "feed_interval_minutes": (120, 180),
        "expected_feeds": (8, 12),
    },
    {
        "label": "3-4 months",
        "age_range_days": (60, 120),
        "typical_naps": (3, 4),
        "wake_windows": [(75, 90), (90, 105), (90, 105), (105, 120), (105, 120)],
        "feed_interval_minutes": (150, 210),
        "expected_feeds": (6, 8),
    },
    {
        "label": "5-7 months",
        "age_range_days": (120, 210),
        "typical_naps": (2, 3),
        "wake_windows": [(105, 150), (120, 165), (135, 180), (150, 180)],
        "feed_interval_minutes": (180, 240),
        "expected_feeds": (5, 6),
    },
    {
        "label": "8-10 months",
        "age_range_days": (210, 300),
        "typical_naps": (2, 2),
        "wake_windows": [(150, 180), (180, 210), (180, 240)],
        "feed_interval_minutes": (210, 270),
        "expected_feeds": (4, 5),
    },
    {
        "label": "11-14 months",
        "age_range_days": (300, 420),
        "typical_naps": (1, 2),
        "wake_windows": [(180, 240), (210, 270), (210, 270)],
        "feed_interval_minutes": (210, 270),
        "expected_feeds": (4, 5),
    },
]


# ── INTAKE & SLEEP TARGETS ───────────────────────────────────────────────────
# Keyed by the bracket's lower age bound (days). Each entry is
# (exclusive_upper_bound_days, value); the first match wins, None = fallback.
# No clinical source, rough ounce estimates for a nursing session.
NURSING_OZ_PER_MINUTE = [
    (30, 0.1),
    (60, 0.15),
    (None, 0.2),
]

DAILY_INTAKE_OZ = [
    (60, (14, 28)),
    (120, (24, 32)),
    (210, (24, 36)),
    (300, (24, 32)),
    (None, (20, 28)),
]

DAILY_SLEEP_HOURS = [
    (120, (14, 17)),
    (210, (12, 16)),
    (None, (12, 15)),
]


# ── DAY STATE THRESHOLDS ─────────────────────────────────────────────────────
# No clinical source, app-level UX windows.
# Minutes before bedtime that count as the bedtime window.
BEDTIME_WINDOW_MINUTES = 30
# Minutes before the nap cutoff at which a running nap gets flagged.
NAP_CUTOFF_WARNING_MINUTES = 30

# A feed is "approaching" once this fraction of the interval's lower bound
# has elapsed. Result is truncated to whole minutes.
FEED_APPROACHING_FACTOR = 0.8

# No clinical source, used to size the suggested bottle offer.
TARGET_FEEDS_PER_DAY = 7


# No clinical source, standard calendar approximation.
DAYS_PER_MONTH = 30
MINUTES_PER_HOUR = 60
