"""
Production schedule schemas.

A ProductionSchedule is the backward walk from a harvest date through
each growth stage, plus the tray count needed to fill the order.
"""

from pydantic import Field, field_validator
from datetime import date
from decimal import Decimal

from config import settings
from models.base import BaseSchema, coerce_calendar_date


class ProductionRequest(BaseSchema):
    """Order line to be scheduled."""

    quantity_oz: Decimal = Field(
        ...,
        description="Requested output in oz (must be positive)"
    )
    overage_percent: Decimal = Field(
        default_factory=lambda: settings.default_overage_percent,
        description="Safety margin added to quantity, e.g. 10 for 10%"
    )
    harvest_date: date = Field(
        ...,
        description="Target harvest day (time-of-day ignored)"
    )

    @field_validator("harvest_date", mode="before")
    @classmethod
    def normalize_harvest_date(cls, v):
        """Strip time-of-day from datetime inputs."""
        return coerce_calendar_date(v)


class ProductionSchedule(BaseSchema):
    """
    Backward production schedule for one crop.

    Invariant: soak_date <= seed_date <= move_to_light_date <= harvest_date,
    and soak_date == seed_date when requires_soaking is False.
    """

    trays_needed: int = Field(..., ge=1)
    total_quantity_oz: Decimal = Field(
        ...,
        description="Requested quantity with overage applied"
    )
    requires_soaking: bool
    soak_date: date = Field(..., description="Same as seed_date if no soaking")
    seed_date: date
    move_to_light_date: date
    harvest_date: date
    total_growth_days: int = Field(..., ge=0)

    @property
    def start_date(self) -> date:
        """First day of work for this crop (soak, or seed when dry-sown)."""
        return self.soak_date if self.requires_soaking else self.seed_date
