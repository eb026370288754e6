"""
Production schedule service: core scheduling logic.

Converts an order line (quantity, harvest date) and a crop's stage
durations into a backward production schedule:

    harvest_date
      - days_light        → move_to_light_date
      - days_germination  → seed_date
      - days_soaking      → soak_date (== seed_date when not soaked)

Tray counts always round up: a fractional tray is a full tray.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from functools import partial
from math import ceil
from typing import Any, Callable, Optional, Union
import structlog

from exceptions import (
    InvalidParameterError,
    InvalidQuantityError,
    InvalidOverageError,
    InvalidYieldError,
    NegativeStageDurationError,
)
from models.crop import (
    CropTiming,
    Soak,
    ProductionFieldCheck,
    missing_production_fields,
)
from models.production_schedule import ProductionRequest, ProductionSchedule
from utils.date_utils import DateLike, to_date, subtract_days

logger = structlog.get_logger(__name__)

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")


def to_decimal(value: Number, invalid: Optional[Callable[[Any], Exception]] = None) -> Decimal:
    """
    Convert to Decimal without float artifacts (0.1 stays 0.1).

    NaN, infinity and unparseable values raise ``invalid(value)``, or a
    generic InvalidParameterError when no error factory is given.
    """
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        result = None
    if result is None or not result.is_finite():
        if invalid is None:
            raise InvalidParameterError("value", value, "Value must be a finite number")
        raise invalid(value)
    return result


class ProductionScheduleService:
    """
    Tray math and single-crop backward scheduling.

    Stateless: every method reads only its arguments.
    """

    # ===================
    # QUANTITY / TRAYS
    # ===================

    def calculate_total_quantity(
        self,
        quantity_oz: Number,
        overage_percent: Number,
    ) -> Decimal:
        """
        Apply overage to a requested quantity.

        total = quantity × (1 + overage / 100)

        Raises:
            InvalidQuantityError: If quantity_oz <= 0 or not a finite number
            InvalidOverageError: If overage_percent < 0 or not a finite number
        """
        quantity = to_decimal(quantity_oz, InvalidQuantityError)
        overage = to_decimal(overage_percent, InvalidOverageError)
        if quantity <= 0:
            raise InvalidQuantityError(quantity_oz)
        if overage < 0:
            raise InvalidOverageError(overage_percent)
        return quantity * (1 + overage / HUNDRED)

    def trays_for_quantity(
        self,
        total_oz: Number,
        avg_yield_per_tray: Number,
        product_id: Optional[str] = None,
    ) -> int:
        """
        Trays needed to grow total_oz (overage already applied).

        Raises:
            InvalidYieldError: If avg_yield_per_tray <= 0 or not a finite number
            InvalidQuantityError: If total_oz is not a finite number
        """
        avg_yield = self.check_yield(avg_yield_per_tray, product_id)
        return ceil(to_decimal(total_oz, InvalidQuantityError) / avg_yield)

    def check_yield(self, avg_yield_per_tray: Number, product_id: Optional[str] = None) -> Decimal:
        """Yield as a positive, finite Decimal."""
        invalid = partial(InvalidYieldError, product_id=product_id)
        avg_yield = to_decimal(avg_yield_per_tray, invalid)
        if avg_yield <= 0:
            raise invalid(avg_yield_per_tray)
        return avg_yield

    def calculate_trays_needed(
        self,
        quantity_oz: Number,
        avg_yield_per_tray: Number,
        overage_percent: Number,
    ) -> int:
        """
        Trays needed for an order, rounding up.

        Example: 32 oz at 8 oz/tray with 10% overage
            total = 32 × 1.10 = 35.2 oz
            trays = ceil(35.2 / 8) = ceil(4.4) = 5

        Raises:
            InvalidYieldError: If avg_yield_per_tray <= 0 or not a finite number
            InvalidQuantityError: If quantity_oz <= 0 or not a finite number
            InvalidOverageError: If overage_percent < 0 or not a finite number
        """
        avg_yield = self.check_yield(avg_yield_per_tray)
        total = self.calculate_total_quantity(quantity_oz, overage_percent)
        return ceil(total / avg_yield)

    # ===================
    # BACKWARD SCHEDULING
    # ===================

    def calculate_schedule(
        self,
        request: ProductionRequest,
        timing: CropTiming,
    ) -> ProductionSchedule:
        """
        Work backwards from the harvest date through each growth stage.

        Args:
            request: Quantity, overage, and harvest date
            timing: Crop stage durations and yield

        Returns:
            ProductionSchedule with all stage dates and tray count

        Raises:
            InvalidYieldError: If timing.avg_yield_per_tray <= 0
            NegativeStageDurationError: If germination or light days < 0
            InvalidQuantityError / InvalidOverageError: On bad request values
        """
        trays_needed = self.calculate_trays_needed(
            request.quantity_oz,
            timing.avg_yield_per_tray,
            request.overage_percent,
        )
        total_quantity_oz = self.calculate_total_quantity(
            request.quantity_oz, request.overage_percent
        )

        schedule = self.build_schedule(
            harvest_date=request.harvest_date,
            timing=timing,
            trays_needed=trays_needed,
            total_quantity_oz=total_quantity_oz,
        )

        logger.debug(
            "production_schedule_computed",
            harvest_date=str(schedule.harvest_date),
            start_date=str(schedule.start_date),
            trays_needed=trays_needed,
            total_growth_days=schedule.total_growth_days,
        )
        return schedule

    def schedule_order(
        self,
        quantity_oz: Number,
        harvest_date: DateLike,
        timing: CropTiming,
        overage_percent: Optional[Number] = None,
    ) -> ProductionSchedule:
        """
        Convenience wrapper taking raw order values.

        overage_percent falls back to settings.default_overage_percent
        only when omitted.
        """
        fields = {"quantity_oz": quantity_oz, "harvest_date": harvest_date}
        if overage_percent is not None:
            fields["overage_percent"] = overage_percent
        return self.calculate_schedule(ProductionRequest(**fields), timing)

    def stage_dates(
        self,
        harvest_date: DateLike,
        timing: CropTiming,
    ) -> dict[str, Any]:
        """
        Stage dates only, without any tray math.

        Returns:
            Dict with requires_soaking, soak_date, seed_date,
            move_to_light_date, harvest_date, total_growth_days
        """
        self.check_durations(timing)

        harvest = to_date(harvest_date)
        move_to_light_date = subtract_days(harvest, timing.days_light)
        seed_date = subtract_days(move_to_light_date, timing.days_germination)

        stage = timing.soak_stage
        if isinstance(stage, Soak):
            soak_date = subtract_days(seed_date, stage.days)
        else:
            soak_date = seed_date

        return {
            "requires_soaking": isinstance(stage, Soak),
            "soak_date": soak_date,
            "seed_date": seed_date,
            "move_to_light_date": move_to_light_date,
            "harvest_date": harvest,
            "total_growth_days": timing.total_growth_days,
        }

    def build_schedule(
        self,
        harvest_date: date,
        timing: CropTiming,
        trays_needed: int,
        total_quantity_oz: Decimal,
        schedule_cls: type = ProductionSchedule,
        **extra: Any,
    ) -> ProductionSchedule:
        """Build a ProductionSchedule (or subclass) from stage dates."""
        return schedule_cls(
            trays_needed=trays_needed,
            total_quantity_oz=total_quantity_oz,
            **self.stage_dates(harvest_date, timing),
            **extra,
        )

    def check_durations(self, timing: CropTiming) -> None:
        """Negative germination/light durations would put dates after harvest."""
        if timing.days_germination < 0:
            raise NegativeStageDurationError("days_germination", timing.days_germination)
        if timing.days_light < 0:
            raise NegativeStageDurationError("days_light", timing.days_light)

    # ===================
    # PRODUCT VALIDATION
    # ===================

    def validate_production_fields(self, product: Any) -> ProductionFieldCheck:
        """
        Check a product row has everything needed for scheduling.

        Soaking is optional; germination days, light days, and yield are not.
        """
        missing = missing_production_fields(product)
        return ProductionFieldCheck(valid=not missing, missing=missing)


# Singleton instance
_service: Optional[ProductionScheduleService] = None


def get_production_schedule_service() -> ProductionScheduleService:
    """Get or create ProductionScheduleService instance."""
    global _service
    if _service is None:
        _service = ProductionScheduleService()
    return _service
