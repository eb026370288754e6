"""
Shared test fixtures.

Scheduling is pure, so fixtures are plain values and fresh service
instances; there is nothing to mock.
"""

import sys
from pathlib import Path

# Add repo root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest
from datetime import date
from decimal import Decimal

from models.blend import BlendIngredient
from models.crop import CropTiming
from services.blend_schedule_service import BlendScheduleService
from services.production_schedule_service import ProductionScheduleService
from services.recurring_schedule_service import RecurringScheduleService


# ===================
# SERVICES
# ===================

@pytest.fixture
def production_service() -> ProductionScheduleService:
    """Fresh ProductionScheduleService."""
    return ProductionScheduleService()


@pytest.fixture
def blend_service() -> BlendScheduleService:
    """Fresh BlendScheduleService."""
    return BlendScheduleService()


@pytest.fixture
def recurring_service() -> RecurringScheduleService:
    """Fresh RecurringScheduleService."""
    return RecurringScheduleService()


# ===================
# CROP DATA
# ===================

@pytest.fixture
def harvest_date() -> date:
    """A Sunday in mid June."""
    return date(2025, 6, 15)


@pytest.fixture
def pea_shoot_timing() -> CropTiming:
    """Soaked crop: 1 day soak, 2 germination, 4 light, 10 oz/tray."""
    return CropTiming(
        days_soaking=1,
        days_germination=2,
        days_light=4,
        avg_yield_per_tray=Decimal("10"),
    )


@pytest.fixture
def radish_timing() -> CropTiming:
    """Dry-sown crop: 3 germination, 7 light, 8 oz/tray."""
    return CropTiming(
        days_soaking=None,
        days_germination=3,
        days_light=7,
        avg_yield_per_tray=Decimal("8"),
    )


@pytest.fixture
def sample_product_row() -> dict:
    """Product row as the persistence layer returns it."""
    return {
        "id": "prod-radish",
        "name": "Radish Triton",
        "days_soaking": None,
        "days_germination": 3,
        "days_light": 7,
        "avg_yield_per_tray": Decimal("8"),
    }


def make_ingredient(**kw) -> BlendIngredient:
    """Blend ingredient with sensible defaults."""
    args = dict(
        product_id="prod-a",
        product_name="Pea Shoots",
        ratio_percent=Decimal("50"),
        days_soaking=None,
        days_germination=3,
        days_light=7,
        avg_yield_per_tray=Decimal("8"),
    )
    args.update(kw)
    return BlendIngredient(**args)


@pytest.fixture
def ingredient_factory():
    """Build BlendIngredient instances: ingredient_factory(ratio_percent=60, ...)."""
    return make_ingredient
