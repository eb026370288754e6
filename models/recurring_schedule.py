"""
Recurring order schedule schemas.
"""

from pydantic import Field, field_validator
from typing import Optional
from enum import Enum
from datetime import date

from config import settings
from models.base import BaseSchema, coerce_calendar_date


class RecurrenceType(str, Enum):
    """How a recurring order repeats."""
    FIXED_DAY = "FIXED_DAY"  # Same weekday(s) every week
    INTERVAL = "INTERVAL"    # Every N days from start_date


class RecurringScheduleDef(BaseSchema):
    """
    Definition of a repeating order.

    Weekdays use Sunday = 0 ... Saturday = 6. Range checks happen in the
    generator so bad input raises InvalidParameterError.
    """

    schedule_type: RecurrenceType
    days_of_week: list[int] = Field(
        default_factory=list,
        description="Weekdays for FIXED_DAY (0 = Sunday)"
    )
    interval_days: Optional[int] = Field(
        None,
        description="Days between harvests for INTERVAL"
    )
    start_date: date
    end_date: Optional[date] = None
    lead_time_days: int = Field(
        default_factory=lambda: settings.default_lead_time_days,
        description="How far ahead occurrences are generated"
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        """Strip time-of-day from datetime inputs."""
        return coerce_calendar_date(v)
