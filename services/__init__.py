"""
Scheduling services.

Each service handles one area of production planning.
"""

from services.production_schedule_service import (
    ProductionScheduleService,
    get_production_schedule_service,
)
from services.blend_schedule_service import (
    BlendScheduleService,
    get_blend_schedule_service,
)
from services.recurring_schedule_service import (
    RecurringScheduleService,
    get_recurring_schedule_service,
)

__all__ = [
    "ProductionScheduleService",
    "get_production_schedule_service",
    "BlendScheduleService",
    "get_blend_schedule_service",
    "RecurringScheduleService",
    "get_recurring_schedule_service",
]
