# petungan/core/direct.py
# -----------------------------------------------------------------------------
# Direct Engine - Closed-Form Drift Approximation
#
# Model:
#   difference = 78 ∓ round(|years_from_base| × 10.875833 / 365.2425)
#   gregorian  = jawa + max(difference, 1)
#
# The difference shrinks by about one year every 33.6 years after the base
# and grows symmetrically before it. No date arithmetic is involved; results
# agree with the precise engine within ±1 year and diverge only near the
# years where two 1 Sura fall in one Gregorian year.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import math

from petungan.core.constants import (
    DIRECT_MAX_ITERATIONS,
    DIVERGENCE_LIMIT,
    JAVANESE_CALENDAR_CONSTANTS,
)
from petungan.core.validation import ConversionDivergenceError, require_year

log = logging.getLogger(__name__)

__all__ = [
    "jawa_to_gregorian_direct",
    "gregorian_to_jawa_direct",
]

_C = JAVANESE_CALENDAR_CONSTANTS

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def _difference(jawa_year: int) -> int:
    """Gregorian - Javanese difference for a Javanese year."""
    years_from_base = jawa_year - _C.BASE_JAWA
    total_drift_days = abs(years_from_base) * _C.DRIFT_PER_YEAR
    decrement = _round_half_up(total_drift_days / _C.SOLAR_YEAR_DAYS)

    if years_from_base >= 0:
        difference = _C.INITIAL_DIFFERENCE - decrement
    else:
        difference = _C.INITIAL_DIFFERENCE + decrement
    return max(difference, _C.MIN_DIFFERENCE)

def jawa_to_gregorian_direct(jawa_year: int) -> int:
    """Approximate Gregorian year for a Javanese year."""
    jawa_year = require_year(jawa_year, "Javanese")
    return jawa_year + _difference(jawa_year)

def gregorian_to_jawa_direct(gregorian_year: int) -> int:
    """
    Approximate Javanese year for a Gregorian year.

    Fixed-point iteration on the forward formula, seeded at
    ``gregorian_year - 78``. Returns the last estimate if no exact preimage
    is found within the iteration budget.

    Raises:
        InvalidYearError: non-integer input
        ConversionDivergenceError: the estimate error exceeded 1000 years
    """
    gregorian_year = require_year(gregorian_year, "Gregorian")

    estimate = gregorian_year - _C.INITIAL_DIFFERENCE
    for iteration in range(DIRECT_MAX_ITERATIONS):
        error = estimate + _difference(estimate) - gregorian_year
        if error == 0:
            return estimate
        if abs(error) > DIVERGENCE_LIMIT:
            raise ConversionDivergenceError(
                f"Conversion failed for Gregorian year {gregorian_year}: "
                f"error of {error} years at iteration {iteration}"
            )
        estimate -= error

    log.debug(
        "No exact preimage for %d CE after %d iterations; using %d AJ",
        gregorian_year, DIRECT_MAX_ITERATIONS, estimate,
    )
    return estimate
