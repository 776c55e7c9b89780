# This project was developed with assistance from AI tools.
"""Calendar helpers for payment dates."""

import calendar
from datetime import date, datetime


def add_months(start: date, months: int) -> date:
    """Return ``start`` moved by ``months`` calendar months.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29 in a leap year).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def to_date_string(value: date | datetime) -> str:
    """Normalize a date to the ``YYYY-MM-DD`` form used for payment dates."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()
