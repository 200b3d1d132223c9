from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError

# Order matters: day-first wins over month-first for ambiguous slashed dates.
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%m/%d/%Y", "%Y/%m/%d")


def parse_date(value: str) -> Optional[date]:
    """Parse a date token against the accepted formats.

    Returns the first format that yields a valid calendar date, or None.
    "03/04/2024" is read as 3 April 2024.
    """
    if not value:
        return None
    token = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(token, fmt).date()
        except ValueError:
            continue
    return None


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def parse_clock(value: str) -> Optional[time]:
    """Parse H:MM:SS / HH:MM:SS into a time of day."""
    try:
        return datetime.strptime(value.strip(), "%H:%M:%S").time()
    except (AttributeError, ValueError):
        return None


def parse_cutoff(value: str) -> time:
    """Parse an HH:MM cutoff setting."""
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid cutoff time: {value!r}")


def seconds_since_midnight(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def minutes_since_midnight(value: time) -> int:
    return seconds_since_midnight(value) // 60


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m")
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r}")
    return parsed.year, parsed.month


def format_year_month(value: date) -> str:
    return value.strftime("%Y-%m")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
