"""
Blend schedule service.

Schedules every ingredient of a blend from one shared harvest date.
Each ingredient walks backward on its own timing, so ingredients with
longer growth cycles start earlier (a staggered start):

    blend total   = quantity × (1 + overage / 100)
    ingredient oz = blend total × ratio / 100
    trays         = ceil(ingredient oz / ingredient yield)
"""

from decimal import Decimal
from typing import Optional, Sequence
import structlog

from config import settings
from exceptions import (
    EmptyBlendError,
    InvalidBlendRatioError,
    InvalidYieldError,
)
from models.blend import (
    BlendIngredient,
    BlendProductionSchedule,
    IngredientProductionSchedule,
)
from services.production_schedule_service import (
    HUNDRED,
    Number,
    get_production_schedule_service,
    to_decimal,
)
from utils.date_utils import DateLike, to_date

logger = structlog.get_logger(__name__)


class BlendScheduleService:
    """Staggered production scheduling for multi-ingredient blends."""

    def __init__(self):
        self.production_service = get_production_schedule_service()

    def calculate_blend_schedule(
        self,
        quantity_oz: Number,
        overage_percent: Number,
        harvest_date: DateLike,
        ingredients: Sequence[BlendIngredient],
    ) -> BlendProductionSchedule:
        """
        Schedule all ingredients of a blend for one harvest date.

        All ingredients are validated before any is scheduled, so a bad
        ingredient fails the whole blend with no partial result.

        Example: 20 oz, 0% overage, harvest D
            A (60%, soak 1, germ 2, light 4) → 12 oz, starts D-7
            B (40%, no soak, germ 3, light 8) → 8 oz, starts D-11
            earliest_start_date = D-11

        Raises:
            EmptyBlendError: If ingredients is empty
            InvalidBlendRatioError: If any ratio is outside (0, 100]
            InvalidYieldError: If any ingredient yield <= 0
        """
        self._validate_ingredients(ingredients)

        harvest = to_date(harvest_date)
        total_with_overage = self.production_service.calculate_total_quantity(
            quantity_oz, overage_percent
        )

        schedules = []
        for ingredient in ingredients:
            target_oz = total_with_overage * (ingredient.ratio_percent / HUNDRED)
            trays_needed = self.production_service.trays_for_quantity(
                target_oz, ingredient.avg_yield_per_tray, ingredient.product_id
            )
            schedules.append(
                self.production_service.build_schedule(
                    harvest_date=harvest,
                    timing=ingredient.timing,
                    trays_needed=trays_needed,
                    total_quantity_oz=target_oz,
                    schedule_cls=IngredientProductionSchedule,
                    product_id=ingredient.product_id,
                    product_name=ingredient.product_name,
                    target_oz=target_oz,
                    ratio_percent=ingredient.ratio_percent,
                )
            )

        earliest_start_date = min(s.start_date for s in schedules)
        ratio_total = sum((i.ratio_percent for i in ingredients), Decimal("0"))
        ratios_balanced = self.ratios_balanced(ratio_total)

        if not ratios_balanced:
            logger.warning(
                "blend_ratios_unbalanced",
                ratio_total_percent=str(ratio_total),
                ingredients=[i.product_id for i in ingredients],
            )

        logger.debug(
            "blend_schedule_computed",
            harvest_date=str(harvest),
            earliest_start_date=str(earliest_start_date),
            ingredient_count=len(schedules),
        )

        return BlendProductionSchedule(
            blend_harvest_date=harvest,
            total_quantity_oz=total_with_overage,
            earliest_start_date=earliest_start_date,
            max_growth_days=max(s.total_growth_days for s in schedules),
            ratio_total_percent=ratio_total,
            ratios_balanced=ratios_balanced,
            ingredients=schedules,
        )

    def get_blend_max_growth_days(self, ingredients: Sequence[BlendIngredient]) -> int:
        """Longest effective growth cycle among ingredients (0 if none)."""
        return max((i.timing.total_growth_days for i in ingredients), default=0)

    def calculate_blend_avg_yield(self, ingredients: Sequence[BlendIngredient]) -> Decimal:
        """
        Ratio-weighted average yield per tray for the blend as a whole.

        Example: 60% at 10 oz/tray + 40% at 5 oz/tray = 6 + 2 = 8 oz/tray

        Raises:
            EmptyBlendError: If ingredients is empty
            InvalidYieldError: If any ingredient yield <= 0
        """
        if not ingredients:
            raise EmptyBlendError()
        total = Decimal("0")
        for ingredient in ingredients:
            if ingredient.avg_yield_per_tray <= 0:
                raise InvalidYieldError(ingredient.avg_yield_per_tray, ingredient.product_id)
            total += ingredient.avg_yield_per_tray * (ingredient.ratio_percent / HUNDRED)
        return total

    def ratios_balanced(
        self,
        ratio_total: Number,
        tolerance: Optional[Number] = None,
    ) -> bool:
        """Whether ratios sum to 100% within tolerance (settings default)."""
        if tolerance is None:
            tolerance = settings.blend_ratio_tolerance_percent
        return abs(to_decimal(ratio_total) - HUNDRED) < to_decimal(tolerance)

    def _validate_ingredients(self, ingredients: Sequence[BlendIngredient]) -> None:
        if not ingredients:
            raise EmptyBlendError()
        for ingredient in ingredients:
            if not (0 < ingredient.ratio_percent <= HUNDRED):
                raise InvalidBlendRatioError(ingredient.ratio_percent, ingredient.product_id)
            if ingredient.avg_yield_per_tray <= 0:
                raise InvalidYieldError(ingredient.avg_yield_per_tray, ingredient.product_id)
            self.production_service.check_durations(ingredient.timing)


# Singleton instance
_service: Optional[BlendScheduleService] = None


def get_blend_schedule_service() -> BlendScheduleService:
    """Get or create BlendScheduleService instance."""
    global _service
    if _service is None:
        _service = BlendScheduleService()
    return _service
