"""
Blend schemas.

A blend (e.g. a salad mix) is sold as one product but grown as several
ingredients, each on its own timing, all harvested on the same day.
"""

from pydantic import Field
from typing import Optional
from datetime import date
from decimal import Decimal

from models.base import BaseSchema
from models.crop import CropTiming
from models.production_schedule import ProductionSchedule


class BlendIngredient(BaseSchema):
    """
    One ingredient of a blend.

    Timing fields come from the ingredient's product; the override_* fields
    let a blend grow an ingredient on a different cycle than the product's
    default.
    """

    product_id: str
    product_name: str
    ratio_percent: Decimal = Field(
        ...,
        description="Share of the blend, in (0, 100]"
    )

    # Product timing
    days_soaking: Optional[int] = None
    days_germination: Optional[int] = None
    days_light: Optional[int] = None
    avg_yield_per_tray: Decimal

    # Blend-specific overrides
    override_days_soaking: Optional[int] = None
    override_days_germination: Optional[int] = None
    override_days_light: Optional[int] = None

    @property
    def timing(self) -> CropTiming:
        """Effective timing: override if set, else product value."""
        def pick(override: Optional[int], value: Optional[int]) -> Optional[int]:
            return override if override is not None else value

        return CropTiming(
            days_soaking=pick(self.override_days_soaking, self.days_soaking),
            days_germination=pick(self.override_days_germination, self.days_germination) or 0,
            days_light=pick(self.override_days_light, self.days_light) or 0,
            avg_yield_per_tray=self.avg_yield_per_tray,
        )


class IngredientProductionSchedule(ProductionSchedule):
    """Production schedule for one ingredient of a blend."""

    product_id: str
    product_name: str
    target_oz: Decimal = Field(
        ...,
        description="Ingredient share of the blend total (overage included)"
    )
    ratio_percent: Decimal


class BlendProductionSchedule(BaseSchema):
    """
    Staggered schedule for every ingredient of a blend.

    Every ingredient's harvest_date equals blend_harvest_date; the
    earliest_start_date is the start of the longest-growing ingredient.
    """

    blend_harvest_date: date
    total_quantity_oz: Decimal = Field(
        ...,
        description="Blend quantity with overage applied"
    )
    earliest_start_date: date
    max_growth_days: int = Field(..., ge=0)
    ratio_total_percent: Decimal
    ratios_balanced: bool = Field(
        ...,
        description="Whether ratios sum to 100% within tolerance"
    )
    ingredients: list[IngredientProductionSchedule]

    @property
    def total_trays(self) -> int:
        return sum(ing.trays_needed for ing in self.ingredients)
