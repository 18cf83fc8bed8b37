# services/formatting.py
"""
Human-readable renderings of interview timestamps and durations.

Timestamps are shown in the local zone of whoever renders them (the server, or
DISPLAY_TIMEZONE when set). Naive datetimes coming back from the store are
taken to be UTC.
"""
from datetime import datetime, timezone, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from zoneinfo import ZoneInfo

from core.config import settings


def display_zone() -> Optional[tzinfo]:
    if settings.display_timezone:
        return ZoneInfo(settings.display_timezone)
    return None  # astimezone(None) -> system local zone


def to_local(ts: datetime, tz: Optional[tzinfo] = None) -> datetime:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(tz if tz is not None else display_zone())


def format_date(ts: datetime, tz: Optional[tzinfo] = None) -> str:
    """'Oct 19'"""
    local = to_local(ts, tz)
    return f"{local:%b} {local.day}"


def format_time(ts: datetime, tz: Optional[tzinfo] = None) -> str:
    """'03:45 PM'"""
    return to_local(ts, tz).strftime("%I:%M %p")


def format_datetime(ts: datetime, tz: Optional[tzinfo] = None) -> str:
    """list-row form: 'Oct 19, 03:45 PM'"""
    return f"{format_date(ts, tz)}, {format_time(ts, tz)}"


def duration_seconds(duration_ms: Optional[int]) -> int:
    ms = max(0, int(duration_ms or 0))
    # round half up like a browser's Math.round, not banker's rounding
    return int((Decimal(ms) / 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_duration(duration_ms: Optional[int]) -> str:
    total = duration_seconds(duration_ms)
    minutes, seconds = divmod(total, 60)
    if minutes:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
