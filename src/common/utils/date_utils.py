"""Utility functions for date manipulation."""

from datetime import datetime

import pytz

from src.common.config.settings import settings

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def to_local_time(dt: datetime | None, tz_name: str | None = None) -> datetime | None:
    """Converts a timestamp to the configured display timezone.

    Naive values are treated as UTC, which is how MySQL hands back TIMESTAMP columns
    on a server running in UTC.
    """
    if dt is None:
        return None
    try:
        target_tz = pytz.timezone(tz_name or settings.APP_TIMEZONE)
    except pytz.UnknownTimeZoneError:
        target_tz = pytz.utc
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(target_tz)


def format_datetime_for_display(dt: datetime | None, tz_name: str | None = None) -> str:
    """Formats a timestamp for console output, or "N/A" when missing."""
    local_dt = to_local_time(dt, tz_name)
    if local_dt is None:
        return "N/A"
    return local_dt.strftime(DISPLAY_FORMAT)
