"""
Recurring schedule service.

Generates upcoming harvest dates for repeating orders. The search window
is always bounded:

    window_start = max(start_date, today)
    window_end   = min(end_date, today + lead_time_days)

so enumeration terminates after at most lead_time_days steps (plus the
INTERVAL fast-forward from start_date to the window).
"""

from datetime import date, timedelta
from typing import Iterable, Optional
import structlog

from exceptions import (
    InvalidDaysOfWeekError,
    InvalidIntervalError,
    InvalidLeadTimeError,
)
from models.recurring_schedule import RecurrenceType, RecurringScheduleDef
from utils.date_utils import (
    DateLike,
    add_days,
    iter_days,
    normalize_date_set,
    sunday_based_weekday,
    today as current_day,
)
from utils.labels import get_short_day_name

logger = structlog.get_logger(__name__)


class RecurringScheduleService:
    """Occurrence generation for FIXED_DAY and INTERVAL schedules."""

    def get_upcoming_dates(
        self,
        schedule: RecurringScheduleDef,
        skipped_dates: Optional[Iterable[DateLike]] = None,
        from_date: Optional[DateLike] = None,
    ) -> list[date]:
        """
        Occurrence dates within the lookahead window, ascending.

        Args:
            schedule: Recurring schedule definition
            skipped_dates: Dates to leave out (time-of-day ignored)
            from_date: Override for today (useful for testing)

        Returns:
            Ascending list of dates, excluding skipped ones

        Raises:
            InvalidLeadTimeError: If lead_time_days <= 0
            InvalidDaysOfWeekError: FIXED_DAY with empty or out-of-range weekdays
            InvalidIntervalError: INTERVAL without a positive interval_days
        """
        self.validate(schedule)

        today = current_day(from_date)
        window = self._window(schedule, today)
        if window is None:
            return []
        window_start, window_end = window

        skipped = normalize_date_set(skipped_dates)

        if schedule.schedule_type == RecurrenceType.FIXED_DAY:
            dates = self._fixed_day_dates(schedule, window_start, window_end, skipped)
        else:
            dates = self._interval_dates(schedule, window_start, window_end, skipped)

        logger.debug(
            "recurring_dates_computed",
            schedule_type=schedule.schedule_type.value,
            window_start=str(window_start),
            window_end=str(window_end),
            count=len(dates),
            skipped=len(skipped),
        )
        return dates

    def get_next_date(
        self,
        schedule: RecurringScheduleDef,
        skipped_dates: Optional[Iterable[DateLike]] = None,
        from_date: Optional[DateLike] = None,
    ) -> Optional[date]:
        """First upcoming occurrence, or None if the window is empty."""
        dates = self.get_upcoming_dates(schedule, skipped_dates, from_date)
        return dates[0] if dates else None

    def describe_schedule(self, schedule: RecurringScheduleDef) -> str:
        """
        Human-readable summary.

        Examples:
            - FIXED_DAY [4, 1] → "Every Mon, Thu"
            - INTERVAL 14 → "Every 14 days"
        """
        if schedule.schedule_type == RecurrenceType.FIXED_DAY:
            day_names = [get_short_day_name(d) for d in sorted(set(schedule.days_of_week))]
            return f"Every {', '.join(day_names)}"
        return f"Every {schedule.interval_days} days"

    def validate(self, schedule: RecurringScheduleDef) -> None:
        """Raise InvalidParameterError subclasses for malformed definitions."""
        if schedule.lead_time_days <= 0:
            raise InvalidLeadTimeError(schedule.lead_time_days)

        if schedule.schedule_type == RecurrenceType.FIXED_DAY:
            days = schedule.days_of_week
            if not days or any(d < 0 or d > 6 for d in days):
                raise InvalidDaysOfWeekError(days)
        elif schedule.interval_days is None or schedule.interval_days <= 0:
            raise InvalidIntervalError(schedule.interval_days)

    def _window(
        self,
        schedule: RecurringScheduleDef,
        today: date,
    ) -> Optional[tuple[date, date]]:
        """Inclusive search window, or None when it is empty."""
        window_start = max(schedule.start_date, today)
        window_end = add_days(today, schedule.lead_time_days)
        if schedule.end_date is not None:
            window_end = min(window_end, schedule.end_date)
        if window_start > window_end:
            return None
        return window_start, window_end

    def _fixed_day_dates(
        self,
        schedule: RecurringScheduleDef,
        window_start: date,
        window_end: date,
        skipped: frozenset[date],
    ) -> list[date]:
        weekdays = set(schedule.days_of_week)
        return [
            day
            for day in iter_days(window_start, window_end)
            if sunday_based_weekday(day) in weekdays and day not in skipped
        ]

    def _interval_dates(
        self,
        schedule: RecurringScheduleDef,
        window_start: date,
        window_end: date,
        skipped: frozenset[date],
    ) -> list[date]:
        step = timedelta(days=schedule.interval_days)

        # Fast-forward from start_date; O(steps from start to window)
        current = schedule.start_date
        while current < window_start:
            current += step

        dates = []
        while current <= window_end:
            if current not in skipped:
                dates.append(current)
            current += step
        return dates


# Singleton instance
_service: Optional[RecurringScheduleService] = None


def get_recurring_schedule_service() -> RecurringScheduleService:
    """Get or create RecurringScheduleService instance."""
    global _service
    if _service is None:
        _service = RecurringScheduleService()
    return _service
