"""Timestamp conversion and relative time formatting."""

import math
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from ..config import (
    SECONDS_PER_MINUTE,
    MINUTES_PER_HOUR,
    HOURS_PER_DAY,
    DAYS_BEFORE_DATE,
    JUST_NOW_LABEL,
    INVALID_DATE_LABEL,
)


def current_time_ms() -> int:
    """Current wall clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def ms_to_datetime(timestamp_ms: float) -> datetime:
    """Convert Unix milliseconds timestamp to local datetime.

    Raises:
        OverflowError, OSError or ValueError if the platform cannot
        represent the instant.
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).astimezone()


def format_locale_date(dt: datetime) -> str:
    """Format datetime as a date in the active LC_TIME locale (no time)."""
    return dt.strftime('%x')


def _floor_div(value, divisor):
    # float infinities would otherwise floor to NaN
    if isinstance(value, float) and math.isinf(value):
        return value
    return value // divisor


def _plural(count: float, unit: str) -> str:
    count = int(count)
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"


def get_friendly_notif_time_string(
    timestamp: float,
    now_ms: Optional[float] = None,
    date_formatter: Optional[Callable[[datetime], str]] = None,
) -> str:
    """Describe how long ago a notification arrived.

    Produces 'Just now', 'N mins ago', 'N hours ago' or 'N days ago', and
    falls back to a calendar date once the notification is a week old.

    Future timestamps give a negative elapsed time, which lands in the
    'Just now' bucket.

    Args:
        timestamp: Unix timestamp in milliseconds
        now_ms: Reference time in milliseconds (defaults to the current time)
        date_formatter: Renders the date for week-old notifications
            (defaults to format_locale_date)

    Returns:
        Human readable relative time string. Never raises; a non-numeric
        or unrepresentable timestamp renders as 'Invalid Date'.
    """
    if now_ms is None:
        now_ms = current_time_ms()

    try:
        diff = now_ms - timestamp
    except TypeError:
        return INVALID_DATE_LABEL

    seconds = _floor_div(diff, 1000)
    minutes = _floor_div(seconds, SECONDS_PER_MINUTE)
    hours = _floor_div(minutes, MINUTES_PER_HOUR)
    days = _floor_div(hours, HOURS_PER_DAY)

    if seconds < SECONDS_PER_MINUTE:
        return JUST_NOW_LABEL
    elif minutes < MINUTES_PER_HOUR:
        return _plural(minutes, "min")
    elif hours < HOURS_PER_DAY:
        return _plural(hours, "hour")
    elif days < DAYS_BEFORE_DATE:
        return _plural(days, "day")

    formatter = date_formatter or format_locale_date
    try:
        return formatter(ms_to_datetime(timestamp))
    except (OverflowError, OSError, ValueError):
        return INVALID_DATE_LABEL
