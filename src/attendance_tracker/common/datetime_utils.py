from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import WEEKDAYS
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: date | str) -> date:
    """Accept a date or its ISO text, as sent by the presentation layer."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def weekday_name(value: date) -> str:
    return WEEKDAYS[value.weekday()]


def parse_clock(value: time | str) -> time:
    """Parse a wall-clock ``HH:MM`` (or ``HH:MM:SS``) into a time."""
    if isinstance(value, time):
        return value

    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def format_clock(value: time) -> str:
    if value.second:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


def parse_timestamp(value: datetime | str) -> datetime:
    """Parse an ISO-8601 timestamp, including the ``Z`` suffix browsers emit."""
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
