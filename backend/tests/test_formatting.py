from datetime import datetime, timezone, timedelta
from zoneinfo import ZoneInfo

import pytest

from services.formatting import (
    duration_seconds,
    format_date,
    format_datetime,
    format_duration,
    format_time,
    to_local,
)

UTC = timezone.utc


@pytest.mark.parametrize(
    "ms,expected",
    [
        (0, "0s"),
        (None, "0s"),
        (-500, "0s"),
        (999, "1s"),
        (59_400, "59s"),
        (59_500, "1m 0s"),
        (65_000, "1m 5s"),
        (120_000, "2m 0s"),
        (3_725_000, "62m 5s"),
    ],
)
def test_format_duration(ms, expected):
    assert format_duration(ms) == expected


def test_duration_seconds_rounds_half_up():
    assert duration_seconds(1500) == 2
    assert duration_seconds(2500) == 3
    assert duration_seconds(2499) == 2
    assert duration_seconds(0) == 0


def test_date_and_time():
    ts = datetime(2025, 10, 9, 15, 5, tzinfo=UTC)
    assert format_date(ts, UTC) == "Oct 9"
    assert format_time(ts, UTC) == "03:05 PM"
    assert format_datetime(ts, UTC) == "Oct 9, 03:05 PM"


def test_renders_in_requested_zone():
    ts = datetime(2025, 10, 19, 2, 30, tzinfo=UTC)
    ny = ZoneInfo("America/New_York")
    assert format_date(ts, ny) == "Oct 18"
    assert format_time(ts, ny) == "10:30 PM"


def test_naive_timestamps_are_utc():
    naive = datetime(2025, 10, 19, 12, 0)
    plus2 = timezone(timedelta(hours=2))
    assert to_local(naive, plus2).hour == 14


def test_default_zone_comes_from_settings():
    # conftest pins DISPLAY_TIMEZONE=UTC
    ts = datetime(2025, 10, 19, 23, 59, tzinfo=UTC)
    assert format_date(ts) == "Oct 19"
    assert format_time(ts) == "11:59 PM"
