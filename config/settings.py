"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
Values here are defaults for callers that omit an input; they never
replace an invalid one.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from decimal import Decimal


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # PRODUCTION DEFAULTS
    # ===================
    default_overage_percent: Decimal = Field(
        default=Decimal("10"),
        ge=0,
        le=100,
        description="Overage applied when an order item does not specify one"
    )
    blend_ratio_tolerance_percent: Decimal = Field(
        default=Decimal("0.1"),
        ge=0,
        le=10,
        description="Allowed deviation of blend ratios from 100% before warning"
    )
    order_number_prefix: str = Field(
        default="ORD",
        min_length=1,
        max_length=10,
        description="Prefix for generated order numbers"
    )

    # ===================
    # RECURRING ORDERS
    # ===================
    default_lead_time_days: int = Field(
        default=28,
        ge=7,
        le=90,
        description="Lookahead horizon for recurring schedules without an explicit lead time"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
