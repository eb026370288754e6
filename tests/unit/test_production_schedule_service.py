"""
Unit tests for the production schedule service.

Covers:
1. Tray calculation (round-up capacity math)
2. Backward scheduling from harvest date
3. Product field validation
"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from math import ceil

from exceptions import (
    InvalidParameterError,
    InvalidQuantityError,
    InvalidOverageError,
    InvalidYieldError,
    NegativeStageDurationError,
)
from models.crop import CropTiming
from models.production_schedule import ProductionRequest
from services.production_schedule_service import (
    ProductionScheduleService,
    get_production_schedule_service,
)


# ===================
# TRAY CALCULATION
# ===================

class TestCalculateTraysNeeded:
    """
    Tests for calculate_trays_needed.

    Formula: trays = ceil(quantity × (1 + overage/100) / yield)
    """

    def test_overage_pushes_into_extra_tray(self, production_service):
        """
        32 oz at 8 oz/tray with 10% overage.

        total = 32 × 1.10 = 35.2 oz
        trays = ceil(35.2 / 8) = ceil(4.4) = 5
        """
        assert production_service.calculate_trays_needed(32, 8, 10) == 5

    def test_exact_fit_does_not_round_up(self, production_service):
        """32 oz at 8 oz/tray, no overage = exactly 4 trays."""
        assert production_service.calculate_trays_needed(32, 8, 0) == 4

    def test_fractional_tray_is_full_tray(self, production_service):
        """1 oz at 8 oz/tray still needs a whole tray."""
        assert production_service.calculate_trays_needed(1, 8, 0) == 1

    def test_decimal_inputs(self, production_service):
        """
        12.5 oz at 6.25 oz/tray with 5% overage.

        total = 12.5 × 1.05 = 13.125
        trays = ceil(13.125 / 6.25) = ceil(2.1) = 3
        """
        trays = production_service.calculate_trays_needed(
            Decimal("12.5"), Decimal("6.25"), Decimal("5")
        )
        assert trays == 3

    def test_float_inputs_avoid_binary_artifacts(self, production_service):
        """
        10 oz at 5.5 oz/tray with 10% overage.

        total = 11.0 exactly; 11 / 5.5 = 2 trays (float math would give 2.0000000000000004)
        """
        assert production_service.calculate_trays_needed(10, 5.5, 10) == 2

    @pytest.mark.parametrize("quantity,yield_,overage", [
        (Decimal("32"), Decimal("8"), Decimal("10")),
        (Decimal("7"), Decimal("3"), Decimal("0")),
        (Decimal("100"), Decimal("12.5"), Decimal("25")),
        (Decimal("0.5"), Decimal("9"), Decimal("50")),
    ])
    def test_matches_formula(self, production_service, quantity, yield_, overage):
        expected = ceil(quantity * (1 + overage / 100) / yield_)
        assert production_service.calculate_trays_needed(quantity, yield_, overage) == expected

    @pytest.mark.parametrize("bad_yield", [0, -1, Decimal("-0.5")])
    def test_non_positive_yield_raises(self, production_service, bad_yield):
        """Yield must be real data; no silent default."""
        with pytest.raises(InvalidYieldError) as exc_info:
            production_service.calculate_trays_needed(32, bad_yield, 10)

        assert exc_info.value.code == "INVALID_YIELD"
        assert exc_info.value.status_code == 422
        assert exc_info.value.details["parameter"] == "avg_yield_per_tray"

    def test_yield_error_is_invalid_parameter(self, production_service):
        with pytest.raises(InvalidParameterError):
            production_service.calculate_trays_needed(32, 0, 10)

    def test_non_positive_quantity_raises(self, production_service):
        with pytest.raises(InvalidQuantityError):
            production_service.calculate_trays_needed(0, 8, 10)

    def test_negative_overage_raises(self, production_service):
        with pytest.raises(InvalidOverageError):
            production_service.calculate_trays_needed(32, 8, -5)

    @pytest.mark.parametrize("bad_quantity", [float("nan"), float("inf"), "abc", Decimal("-Infinity")])
    def test_non_finite_quantity_raises(self, production_service, bad_quantity):
        with pytest.raises(InvalidQuantityError) as exc_info:
            production_service.calculate_trays_needed(bad_quantity, 8, 10)

        assert exc_info.value.details["parameter"] == "quantity_oz"

    @pytest.mark.parametrize("bad_yield", [float("nan"), float("inf"), "eight", Decimal("NaN")])
    def test_non_finite_yield_raises(self, production_service, bad_yield):
        with pytest.raises(InvalidYieldError):
            production_service.calculate_trays_needed(32, bad_yield, 10)

    def test_non_finite_overage_raises(self, production_service):
        with pytest.raises(InvalidOverageError):
            production_service.calculate_trays_needed(32, 8, float("nan"))

    def test_yield_checked_before_quantity(self, production_service):
        with pytest.raises(InvalidYieldError):
            production_service.calculate_trays_needed("abc", float("nan"), 10)


class TestTraysForQuantity:
    """Tests for trays_for_quantity (overage already applied)."""

    def test_rounds_up(self, production_service):
        """35.2 oz at 8 oz/tray = ceil(4.4) = 5."""
        assert production_service.trays_for_quantity(Decimal("35.2"), 8) == 5

    def test_yield_error_carries_product_id(self, production_service):
        with pytest.raises(InvalidYieldError) as exc_info:
            production_service.trays_for_quantity(10, 0, product_id="prod-radish")

        assert exc_info.value.details["product_id"] == "prod-radish"

    def test_non_finite_total_raises(self, production_service):
        with pytest.raises(InvalidParameterError):
            production_service.trays_for_quantity(float("inf"), 8)


class TestCalculateTotalQuantity:
    """Tests for calculate_total_quantity."""

    def test_applies_overage(self, production_service):
        assert production_service.calculate_total_quantity(32, 10) == Decimal("35.2")

    def test_zero_overage(self, production_service):
        assert production_service.calculate_total_quantity(20, 0) == Decimal("20")


# ===================
# BACKWARD SCHEDULING
# ===================

class TestCalculateSchedule:
    """Tests for calculate_schedule."""

    def test_dry_sown_crop(self, production_service, radish_timing):
        """
        No soak, 3 germination, 7 light, harvest 2025-06-15.

        move_to_light = 06-15 - 7 = 06-08
        seed          = 06-08 - 3 = 06-05
        soak          = seed (no soak stage)
        """
        request = ProductionRequest(
            quantity_oz=Decimal("32"),
            overage_percent=Decimal("10"),
            harvest_date=date(2025, 6, 15),
        )

        schedule = production_service.calculate_schedule(request, radish_timing)

        assert schedule.move_to_light_date == date(2025, 6, 8)
        assert schedule.seed_date == date(2025, 6, 5)
        assert schedule.soak_date == date(2025, 6, 5)
        assert schedule.requires_soaking is False
        assert schedule.total_growth_days == 10
        assert schedule.trays_needed == 5
        assert schedule.total_quantity_oz == Decimal("35.2")
        assert schedule.harvest_date == date(2025, 6, 15)

    def test_soaked_crop(self, production_service, pea_shoot_timing, harvest_date):
        """
        1 soak, 2 germination, 4 light, harvest 2025-06-15.

        move_to_light = 06-11, seed = 06-09, soak = 06-08
        """
        request = ProductionRequest(
            quantity_oz=Decimal("20"),
            overage_percent=Decimal("0"),
            harvest_date=harvest_date,
        )

        schedule = production_service.calculate_schedule(request, pea_shoot_timing)

        assert schedule.requires_soaking is True
        assert schedule.soak_date == date(2025, 6, 8)
        assert schedule.seed_date == date(2025, 6, 9)
        assert schedule.move_to_light_date == date(2025, 6, 11)
        assert schedule.total_growth_days == 7
        assert schedule.start_date == date(2025, 6, 8)
        assert schedule.trays_needed == 2

    @pytest.mark.parametrize("soak_days", [None, 0, -2])
    def test_non_positive_soak_skips_stage(self, production_service, harvest_date, soak_days):
        timing = CropTiming(
            days_soaking=soak_days,
            days_germination=2,
            days_light=5,
            avg_yield_per_tray=Decimal("6"),
        )

        schedule = production_service.schedule_order(10, harvest_date, timing, 0)

        assert schedule.requires_soaking is False
        assert schedule.soak_date == schedule.seed_date
        assert schedule.total_growth_days == 7

    def test_zero_length_stages_collapse(self, production_service, harvest_date):
        """All-zero durations put every date on the harvest date."""
        timing = CropTiming(
            days_soaking=0,
            days_germination=0,
            days_light=0,
            avg_yield_per_tray=Decimal("4"),
        )

        schedule = production_service.schedule_order(8, harvest_date, timing, 0)

        assert schedule.soak_date == harvest_date
        assert schedule.seed_date == harvest_date
        assert schedule.move_to_light_date == harvest_date
        assert schedule.total_growth_days == 0

    def test_datetime_harvest_is_normalized(self, production_service, radish_timing):
        """Time-of-day never reaches the schedule."""
        schedule = production_service.schedule_order(
            32, datetime(2025, 6, 15, 17, 45), radish_timing, 10
        )

        assert schedule.harvest_date == date(2025, 6, 15)
        assert schedule.seed_date == date(2025, 6, 5)

    def test_crosses_month_boundary(self, production_service, pea_shoot_timing):
        schedule = production_service.schedule_order(10, date(2025, 3, 3), pea_shoot_timing, 0)

        assert schedule.move_to_light_date == date(2025, 2, 27)
        assert schedule.seed_date == date(2025, 2, 25)
        assert schedule.soak_date == date(2025, 2, 24)

    def test_default_overage_from_settings(self, production_service, radish_timing, harvest_date):
        """Omitted overage uses settings.default_overage_percent (10%)."""
        schedule = production_service.schedule_order(32, harvest_date, radish_timing)

        assert schedule.total_quantity_oz == Decimal("35.2")
        assert schedule.trays_needed == 5

    @pytest.mark.parametrize("field", ["days_germination", "days_light"])
    def test_negative_duration_raises(self, production_service, harvest_date, field):
        values = dict(days_germination=3, days_light=7, avg_yield_per_tray=Decimal("8"))
        values[field] = -1
        timing = CropTiming(**values)

        with pytest.raises(NegativeStageDurationError) as exc_info:
            production_service.schedule_order(32, harvest_date, timing, 10)

        assert exc_info.value.parameter == field

    def test_zero_yield_raises(self, production_service, harvest_date):
        timing = CropTiming(days_germination=3, days_light=7, avg_yield_per_tray=Decimal("0"))

        with pytest.raises(InvalidYieldError):
            production_service.schedule_order(32, harvest_date, timing, 10)

    @pytest.mark.parametrize("soak,germ,light", [
        (None, 0, 0), (2, 0, 9), (0, 4, 0), (3, 3, 3), (12, 1, 14),
    ])
    def test_dates_are_ordered(self, production_service, harvest_date, soak, germ, light):
        timing = CropTiming(
            days_soaking=soak,
            days_germination=germ,
            days_light=light,
            avg_yield_per_tray=Decimal("8"),
        )

        s = production_service.schedule_order(16, harvest_date, timing, 0)

        assert s.soak_date <= s.seed_date <= s.move_to_light_date <= s.harvest_date
        assert (s.harvest_date - s.soak_date).days == s.total_growth_days


class TestStageDates:
    """Tests for stage_dates (no tray math)."""

    def test_no_yield_needed(self, production_service, harvest_date):
        """Stage dates work even for a crop with no yield data yet."""
        timing = CropTiming(days_germination=2, days_light=6, avg_yield_per_tray=Decimal("0"))

        dates = production_service.stage_dates(harvest_date, timing)

        assert dates["seed_date"] == date(2025, 6, 7)
        assert dates["move_to_light_date"] == date(2025, 6, 9)
        assert dates["requires_soaking"] is False


# ===================
# PRODUCT VALIDATION
# ===================

class TestValidateProductionFields:
    """Tests for validate_production_fields."""

    def test_complete_product_is_valid(self, production_service, sample_product_row):
        check = production_service.validate_production_fields(sample_product_row)

        assert check.valid is True
        assert check.missing == []

    def test_reports_missing_fields(self, production_service):
        check = production_service.validate_production_fields({
            "days_soaking": 1,
            "days_germination": None,
            "days_light": 5,
        })

        assert check.valid is False
        assert check.missing == ["Days Germination", "Avg Yield per Tray"]

    def test_soaking_is_optional(self, production_service, sample_product_row):
        row = {k: v for k, v in sample_product_row.items() if k != "days_soaking"}

        assert production_service.validate_production_fields(row).valid is True


class TestSingleton:
    def test_returns_same_instance(self):
        assert get_production_schedule_service() is get_production_schedule_service()

    def test_instance_type(self):
        assert isinstance(get_production_schedule_service(), ProductionScheduleService)
