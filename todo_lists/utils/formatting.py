"""Helpers for timestamps, calendar days and text display."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional


def local_now() -> datetime:
    """Return the current time as a timezone-aware local datetime."""
    return datetime.now().astimezone()


def start_of_day(dt: datetime) -> datetime:
    """Truncate a datetime to midnight, keeping its time zone."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def days_from(dt: datetime, days: int) -> datetime:
    """Return midnight of the calendar day ``days`` after ``dt``."""
    return start_of_day(dt + timedelta(days=days))


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 string. Naive values are taken as local time.

    Raises:
        ValueError: If ``value`` is not a string or not ISO 8601.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Format a datetime as ISO 8601, or None."""
    if dt is None:
        return None
    return dt.isoformat()


def format_date(dt: datetime) -> str:
    """Format datetime as 'YYYY-MM-DD'."""
    return dt.strftime("%Y-%m-%d")


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length, appending '…' if truncated."""
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"
