# petungan/core/validation.py
# -----------------------------------------------------------------------------
# Error Taxonomy, Advisory Warnings & Input Validation
#
# Errors (always surfaced to the caller):
#   • InvalidYearError: year argument is not an integer
#   • ConversionDivergenceError: Direct inverse left its intended domain
#   • CalendarRangeError: Hijri year before 1 AH in the tabular calendar
#
# Advisory warnings (execution continues, a value is returned):
#   • PreReformYearWarning: year predates the 1633 reform reference point
#   • EngineFallbackWarning: facade answered with its fallback engine
# -----------------------------------------------------------------------------

from __future__ import annotations

import numbers
from typing import Any

__all__ = [
    "PetunganError",
    "InvalidYearError",
    "ConversionDivergenceError",
    "CalendarRangeError",
    "PreReformYearWarning",
    "EngineFallbackWarning",
    "require_year",
]

# ───────────────────────────── Exceptions ─────────────────────────────

class PetunganError(Exception):
    """Base class for year conversion errors."""
    pass

class InvalidYearError(PetunganError, TypeError):
    """A year argument is not an integer."""

    def __init__(self, calendar: str, value: Any):
        self.calendar = calendar
        self.value = value
        super().__init__(
            f"Invalid {calendar} year: must be an integer, got {type(value).__name__}"
        )

class ConversionDivergenceError(PetunganError, ArithmeticError):
    """Iterative inverse search diverged; the input is outside the model's domain."""
    pass

class CalendarRangeError(PetunganError, ValueError):
    """Date lies before the epoch of the tabular Islamic calendar."""
    pass

# ───────────────────────────── Warning Categories ─────────────────────────────

class PreReformYearWarning(UserWarning):
    """Year predates the reference point; the result may not be historically meaningful."""
    pass

class EngineFallbackWarning(RuntimeWarning):
    """The primary engine failed and the fallback engine produced the result."""
    pass

# ───────────────────────────── Input Validation ─────────────────────────────

def require_year(value: Any, calendar: str) -> int:
    """
    Validate a year argument and return it as a plain ``int``.

    bool, float (integral or not, NaN included), str and None are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidYearError(calendar, value)
    return int(value)
