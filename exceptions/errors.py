"""
Custom exception classes for the scheduling engine.

The engine raises; callers decide how to surface the error (e.g. as a
422 validation response using to_dict()).
"""

from typing import Optional, Any
from datetime import datetime


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "INVALID_YIELD")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.utcnow().isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class InvalidParameterError(ValidationError):
    """A scheduling input violates its contract."""

    def __init__(
        self,
        parameter: str,
        value: Any,
        message: str,
        code: str = "INVALID_PARAMETER",
        details: Optional[dict] = None
    ):
        self.parameter = parameter
        super().__init__(
            code=code,
            message=message,
            details={"parameter": parameter, "provided": _jsonable(value), **(details or {})}
        )


def _jsonable(value: Any) -> Any:
    """Keep details serializable (Decimals, dates, sets)."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    return str(value)


# ===================
# QUANTITY / TRAY ERRORS
# ===================

class InvalidQuantityError(InvalidParameterError):
    """Requested quantity must be positive."""

    def __init__(self, quantity_oz: Any):
        super().__init__(
            parameter="quantity_oz",
            value=quantity_oz,
            code="INVALID_QUANTITY",
            message="Quantity must be positive"
        )


class InvalidOverageError(InvalidParameterError):
    """Overage percent cannot be negative."""

    def __init__(self, overage_percent: Any):
        super().__init__(
            parameter="overage_percent",
            value=overage_percent,
            code="INVALID_OVERAGE",
            message="Overage percent cannot be negative"
        )


class InvalidYieldError(InvalidParameterError):
    """Average yield per tray must be positive."""

    def __init__(self, avg_yield_per_tray: Any, product_id: Optional[str] = None):
        super().__init__(
            parameter="avg_yield_per_tray",
            value=avg_yield_per_tray,
            code="INVALID_YIELD",
            message="Average yield per tray must be positive",
            details={"product_id": product_id} if product_id else None
        )


class NegativeStageDurationError(InvalidParameterError):
    """A growth stage has a negative duration."""

    def __init__(self, stage: str, days: Any):
        super().__init__(
            parameter=stage,
            value=days,
            code="NEGATIVE_STAGE_DURATION",
            message=f"Stage duration cannot be negative: {stage}"
        )


class MissingProductionDataError(InvalidParameterError):
    """Product record lacks the fields needed to schedule production."""

    def __init__(self, missing: list[str], product_id: Optional[str] = None):
        super().__init__(
            parameter="product",
            value=product_id,
            code="MISSING_PRODUCTION_DATA",
            message=f"Missing production data: {', '.join(missing)}",
            details={"missing": missing}
        )


# ===================
# BLEND ERRORS
# ===================

class InvalidBlendRatioError(InvalidParameterError):
    """Ingredient ratio must be in (0, 100]."""

    def __init__(self, ratio_percent: Any, product_id: Optional[str] = None):
        super().__init__(
            parameter="ratio_percent",
            value=ratio_percent,
            code="INVALID_BLEND_RATIO",
            message="Ingredient ratio must be greater than 0 and at most 100",
            details={"product_id": product_id} if product_id else None
        )


class EmptyBlendError(InvalidParameterError):
    """A blend needs at least one ingredient to be scheduled."""

    def __init__(self):
        super().__init__(
            parameter="ingredients",
            value=[],
            code="EMPTY_BLEND",
            message="A blend must have at least one ingredient"
        )


# ===================
# RECURRING SCHEDULE ERRORS
# ===================

class InvalidIntervalError(InvalidParameterError):
    """INTERVAL schedules need a positive interval."""

    def __init__(self, interval_days: Any):
        super().__init__(
            parameter="interval_days",
            value=interval_days,
            code="INVALID_INTERVAL",
            message="INTERVAL schedules require a positive interval_days"
        )


class InvalidDaysOfWeekError(InvalidParameterError):
    """FIXED_DAY schedules need a non-empty set of weekdays in 0..6."""

    def __init__(self, days_of_week: Any):
        super().__init__(
            parameter="days_of_week",
            value=days_of_week,
            code="INVALID_DAYS_OF_WEEK",
            message="FIXED_DAY schedules require days_of_week values between 0 (Sunday) and 6 (Saturday)"
        )


class InvalidLeadTimeError(InvalidParameterError):
    """Lookahead horizon must be positive."""

    def __init__(self, lead_time_days: Any):
        super().__init__(
            parameter="lead_time_days",
            value=lead_time_days,
            code="INVALID_LEAD_TIME",
            message="Lead time must be a positive number of days"
        )
