"""
Status and label helpers.

Display labels, date formatting, and status derivations (task overdue,
order item stage) shared by every caller so they are not re-derived per
screen or route.
"""

from datetime import date
from typing import Optional

from config import settings
from exceptions import InvalidDaysOfWeekError
from models.production_schedule import ProductionSchedule
from models.status import (
    OrderItemStatus,
    TaskDisplayStatus,
    TaskStatus,
)
from utils.date_utils import DateLike, to_date, today as current_day

ORDER_STATUS_LABELS = {
    "PENDING": "Pending",
    "IN_PROGRESS": "In Progress",
    "READY": "Ready",
    "DELIVERED": "Delivered",
    "CANCELLED": "Cancelled",
}

ORDER_ITEM_STATUS_LABELS = {
    "PENDING": "Pending",
    "SOAKING": "Soaking",
    "GERMINATING": "Germinating",
    "GROWING": "Growing",
    "HARVESTED": "Harvested",
    "CANCELLED": "Cancelled",
}

TASK_TYPE_LABELS = {
    "SOAK": "Soak",
    "SEED": "Seed",
    "MOVE_TO_LIGHT": "Light",
    "HARVESTING": "Harvest",
    "PLANTING": "Planting",
    "WATERING": "Watering",
    "FERTILIZING": "Fertilizing",
    "MAINTENANCE": "Maintenance",
    "INSPECTION": "Inspection",
    "OTHER": "Other",
}

# Sunday-first, matching RecurringScheduleDef.days_of_week
SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

SHORT_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _status_value(status) -> str:
    return status.value if hasattr(status, "value") else str(status)


def get_order_status_label(status) -> str:
    """Label for an order status; unknown values pass through."""
    value = _status_value(status)
    return ORDER_STATUS_LABELS.get(value, value)


def get_order_item_status_label(status) -> str:
    """Label for an order item status; unknown values pass through."""
    value = _status_value(status)
    return ORDER_ITEM_STATUS_LABELS.get(value, value)


def get_task_type_label(task_type) -> str:
    value = _status_value(task_type)
    return TASK_TYPE_LABELS.get(value, value)


def get_short_day_name(day_of_week: int) -> str:
    """
    Short weekday name for a Sunday-based day index.

    Raises:
        InvalidDaysOfWeekError: If day_of_week is outside 0..6
    """
    if not 0 <= day_of_week <= 6:
        raise InvalidDaysOfWeekError([day_of_week])
    return SHORT_DAY_NAMES[day_of_week]


def format_short_date(value: DateLike) -> str:
    """
    Short month/day label, independent of locale.

    Examples:
        - date(2025, 1, 15) → "Jan 15"
        - datetime(2025, 6, 5, 14, 0) → "Jun 5"
    """
    d = to_date(value)
    return f"{SHORT_MONTH_NAMES[d.month - 1]} {d.day}"


def days_until(value: DateLike, today: Optional[DateLike] = None) -> int:
    """Whole days from today to value; negative once the date has passed."""
    return (to_date(value) - current_day(today)).days


def generate_order_number(sequence: int, year: Optional[int] = None) -> str:
    """
    Order number in the form PREFIX-YYYY-NNN.

    Args:
        sequence: Running order count for the farm (1-based)
        year: Defaults to the current year

    Returns:
        e.g. "ORD-2025-007"; sequences past 999 keep all digits
    """
    if year is None:
        year = date.today().year
    return f"{settings.order_number_prefix}-{year}-{sequence:03d}"


# ===================
# TASK STATUS
# ===================

def is_task_overdue(
    status,
    due_date: Optional[DateLike],
    completed_by: Optional[str] = None,
    today: Optional[DateLike] = None,
) -> bool:
    """
    Whether a task counts as overdue.

    A task is overdue once its whole due day has passed and it is either
    not completed, or marked completed without a completed_by record.
    Tasks without a due date and cancelled tasks are never overdue.
    """
    if due_date is None:
        return False
    value = _status_value(status)
    if value == TaskStatus.CANCELLED.value:
        return False
    if to_date(due_date) >= current_day(today):
        return False
    if value != TaskStatus.COMPLETED.value:
        return True
    return not completed_by


def derive_task_display_status(
    status,
    due_date: Optional[DateLike],
    completed_by: Optional[str] = None,
    today: Optional[DateLike] = None,
) -> TaskDisplayStatus:
    """Stored status, or OVERDUE when is_task_overdue() holds."""
    if is_task_overdue(status, due_date, completed_by, today):
        return TaskDisplayStatus.OVERDUE
    return TaskDisplayStatus(_status_value(status))


# ===================
# ORDER ITEM STAGE
# ===================

def get_order_item_status_for_date(
    schedule: ProductionSchedule,
    on_date: Optional[DateLike] = None,
) -> OrderItemStatus:
    """
    Production stage an order item is in on a given day.

    Stages are half-open: a crop is SOAKING from soak_date up to (not
    including) seed_date, GERMINATING until move_to_light_date, GROWING
    until harvest_date, and HARVESTED from harvest_date on. Zero-length
    stages are skipped naturally.
    """
    day = current_day(on_date)
    if day < schedule.start_date:
        return OrderItemStatus.PENDING
    if day < schedule.seed_date:
        return OrderItemStatus.SOAKING
    if day < schedule.move_to_light_date:
        return OrderItemStatus.GERMINATING
    if day < schedule.harvest_date:
        return OrderItemStatus.GROWING
    return OrderItemStatus.HARVESTED
