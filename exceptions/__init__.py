"""
Custom exceptions module.

All scheduling input errors are InvalidParameterError subclasses.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    InvalidParameterError,

    # Quantity / trays
    InvalidQuantityError,
    InvalidOverageError,
    InvalidYieldError,
    NegativeStageDurationError,
    MissingProductionDataError,

    # Blends
    InvalidBlendRatioError,
    EmptyBlendError,

    # Recurring schedules
    InvalidIntervalError,
    InvalidDaysOfWeekError,
    InvalidLeadTimeError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "InvalidParameterError",

    # Quantity / trays
    "InvalidQuantityError",
    "InvalidOverageError",
    "InvalidYieldError",
    "NegativeStageDurationError",
    "MissingProductionDataError",

    # Blends
    "InvalidBlendRatioError",
    "EmptyBlendError",

    # Recurring schedules
    "InvalidIntervalError",
    "InvalidDaysOfWeekError",
    "InvalidLeadTimeError",
]
