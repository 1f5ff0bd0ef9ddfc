"""Calendar helpers for month-based reporting."""

import calendar
from datetime import date, datetime


def parse_date(value) -> date:
    """Normalize a date-like value to a calendar date.

    Args:
        value: ``date``, ``datetime`` or ISO-8601 text (a time part is
            allowed and ignored).

    Returns:
        date: The calendar date.

    Raises:
        ValueError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Empty date value")
        if cleaned.endswith("Z"):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            return date.fromisoformat(cleaned)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(cleaned).date()
        except ValueError as exc:
            raise ValueError(f"Invalid date value: {value!r}") from exc
    raise ValueError(f"Invalid date value: {value!r}")


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def start_of_month(value: date) -> date:
    """Return the first day of the month containing ``value``."""
    return value.replace(day=1)


def shift_months(value: date, months: int) -> date:
    """Move a date by whole calendar months, clamping to month end.

    Args:
        value: Starting date.
        months: Number of months to add (negative to go back).

    Returns:
        date: Shifted date.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


__all__ = ["parse_date", "month_key", "start_of_month", "shift_months"]
