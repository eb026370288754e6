"""
Pydantic models for scheduling inputs and outputs.
"""

from models.base import BaseSchema
from models.status import (
    OrderStatus,
    OrderItemStatus,
    TaskStatus,
    TaskDisplayStatus,
    TaskType,
)
from models.crop import (
    NoSoak,
    Soak,
    SoakStage,
    CropTiming,
    ProductionFieldCheck,
)
from models.production_schedule import (
    ProductionRequest,
    ProductionSchedule,
)
from models.blend import (
    BlendIngredient,
    IngredientProductionSchedule,
    BlendProductionSchedule,
)
from models.recurring_schedule import (
    RecurrenceType,
    RecurringScheduleDef,
)

__all__ = [
    # Base
    "BaseSchema",

    # Status
    "OrderStatus",
    "OrderItemStatus",
    "TaskStatus",
    "TaskDisplayStatus",
    "TaskType",

    # Crop
    "NoSoak",
    "Soak",
    "SoakStage",
    "CropTiming",
    "ProductionFieldCheck",

    # Production schedule
    "ProductionRequest",
    "ProductionSchedule",

    # Blend
    "BlendIngredient",
    "IngredientProductionSchedule",
    "BlendProductionSchedule",

    # Recurring
    "RecurrenceType",
    "RecurringScheduleDef",
]
