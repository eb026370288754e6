"""
Base schemas shared by all scheduling models.

Schedules are values: computed fresh per call and never mutated afterwards.
"""

from pydantic import ConfigDict, BaseModel
from datetime import date
from typing import Any

from utils.date_utils import to_date


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - Auto-trim whitespace from strings
        - Frozen (immutable once constructed, hashable)
        - Allow ORM objects (from_attributes)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True
    )


def coerce_calendar_date(value: Any) -> Any:
    """
    Before-validator: reduce datetimes to their calendar date.

    Pydantic rejects datetimes with a time component for date fields;
    schedules ignore time-of-day entirely, so strip it instead.
    """
    if isinstance(value, date):
        return to_date(value)
    return value
