"""
Calendar helpers for schedule arithmetic.

Every function returns a new date; nothing is mutated in place. Schedules
work at day granularity, so datetimes are reduced to their local calendar
date before any arithmetic.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Optional, Union

DateLike = Union[date, datetime]


def to_date(value: DateLike) -> date:
    """
    Normalize a date or datetime to a calendar date (local midnight).

    Timezone-aware datetimes are converted to local time first so the
    calendar day matches what a person at the farm would see.

    Examples:
        - date(2025, 6, 15) → date(2025, 6, 15)
        - datetime(2025, 6, 15, 18, 30) → date(2025, 6, 15)
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def add_days(value: DateLike, days: int) -> date:
    """Return the calendar date `days` after value (negative to go back)."""
    return to_date(value) + timedelta(days=days)


def subtract_days(value: DateLike, days: int) -> date:
    """Return the calendar date `days` before value."""
    return to_date(value) - timedelta(days=days)


def today(override: Optional[DateLike] = None) -> date:
    """Current calendar date, or the override (useful for testing)."""
    if override is not None:
        return to_date(override)
    return date.today()


def sunday_based_weekday(value: DateLike) -> int:
    """
    Day of week with Sunday = 0 ... Saturday = 6.

    Recurring schedules store weekdays in this convention; Python's
    date.weekday() uses Monday = 0.
    """
    return to_date(value).isoweekday() % 7


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start through end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def normalize_date_set(values: Optional[Iterable[DateLike]]) -> frozenset[date]:
    """Strip time-of-day from every value for day-granularity lookups."""
    if not values:
        return frozenset()
    return frozenset(to_date(v) for v in values)
