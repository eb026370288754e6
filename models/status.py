"""
Status enums for orders, order items, and production tasks.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Customer order status values."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderItemStatus(str, Enum):
    """Production stage of a single order item."""
    PENDING = "PENDING"          # Not started yet
    SOAKING = "SOAKING"
    GERMINATING = "GERMINATING"  # Seeded, in blackout
    GROWING = "GROWING"          # Under lights
    HARVESTED = "HARVESTED"
    CANCELLED = "CANCELLED"


class TaskStatus(str, Enum):
    """Stored task status."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskDisplayStatus(str, Enum):
    """
    Task status as shown to a user.

    OVERDUE is never stored; it is derived from the stored status, the due
    date, and completion data.
    """
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    OVERDUE = "OVERDUE"


class TaskType(str, Enum):
    """Task types. The first four are generated from production schedules."""
    SOAK = "SOAK"
    SEED = "SEED"
    MOVE_TO_LIGHT = "MOVE_TO_LIGHT"
    HARVESTING = "HARVESTING"
    PLANTING = "PLANTING"
    WATERING = "WATERING"
    FERTILIZING = "FERTILIZING"
    MAINTENANCE = "MAINTENANCE"
    INSPECTION = "INSPECTION"
    OTHER = "OTHER"
