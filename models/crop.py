"""
Crop timing schemas.

A crop's growth cycle is three consecutive stages: an optional soak,
germination (blackout), and light. Durations are whole days.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import Field

from exceptions import MissingProductionDataError
from models.base import BaseSchema


# ===================
# SOAK STAGE
# ===================

@dataclass(frozen=True)
class NoSoak:
    """Crop is seeded dry; the soak date collapses onto the seed date."""

    @property
    def days(self) -> int:
        return 0


@dataclass(frozen=True)
class Soak:
    """Seeds soak for `days` (> 0) before seeding."""
    days: int


SoakStage = Union[NoSoak, Soak]


# Required product fields and their display labels
REQUIRED_PRODUCTION_FIELDS = {
    "days_germination": "Days Germination",
    "days_light": "Days Light",
    "avg_yield_per_tray": "Avg Yield per Tray",
}


def _read_field(record: Any, name: str) -> Any:
    """Read a field from a dict row or an ORM-style object."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def missing_production_fields(record: Any) -> list[str]:
    """
    List the labels of production fields a product record lacks.

    Soaking is optional (some seeds are sown dry), so days_soaking is
    never reported.
    """
    return [
        label
        for field, label in REQUIRED_PRODUCTION_FIELDS.items()
        if _read_field(record, field) is None
    ]


class CropTiming(BaseSchema):
    """Stage durations and expected yield for one crop."""

    days_soaking: Optional[int] = Field(
        None,
        description="Soak days; None or <= 0 means no soak stage"
    )
    days_germination: int = Field(
        ...,
        description="Days in blackout after seeding"
    )
    days_light: int = Field(
        ...,
        description="Days under lights before harvest"
    )
    avg_yield_per_tray: Decimal = Field(
        ...,
        description="Average harvested oz per tray"
    )

    @property
    def soak_stage(self) -> SoakStage:
        """Explicit soak stage; non-positive soak days mean no soak."""
        if self.days_soaking is not None and self.days_soaking > 0:
            return Soak(days=self.days_soaking)
        return NoSoak()

    @property
    def requires_soaking(self) -> bool:
        return isinstance(self.soak_stage, Soak)

    @property
    def total_growth_days(self) -> int:
        """Soak + germination + light, with a skipped soak counting as 0."""
        return self.soak_stage.days + self.days_germination + self.days_light

    @classmethod
    def from_product(cls, record: Any) -> "CropTiming":
        """
        Build timing from a product row (dict or object).

        Raises:
            MissingProductionDataError: If germination, light, or yield is missing
        """
        missing = missing_production_fields(record)
        if missing:
            product_id = _read_field(record, "id")
            raise MissingProductionDataError(
                missing, str(product_id) if product_id is not None else None
            )
        return cls(
            days_soaking=_read_field(record, "days_soaking"),
            days_germination=_read_field(record, "days_germination"),
            days_light=_read_field(record, "days_light"),
            avg_yield_per_tray=_read_field(record, "avg_yield_per_tray"),
        )


class ProductionFieldCheck(BaseSchema):
    """Result of checking a product for schedulable production data."""
    valid: bool
    missing: list[str] = Field(default_factory=list)
