# petungan/core/precise.py
# -----------------------------------------------------------------------------
# Precise Engine - Year Correspondence via 1 Sura / 1 Muharram
#
# Definitions:
#   • AJ → CE: the Gregorian year in which 1 Sura of the Javanese year falls
#   • CE → AJ: the Javanese year whose 1 Sura falls within the Gregorian year
#
# Dual New Year Policy:
#   A Hijri year is ~11 days shorter than a Gregorian one, so roughly every
#   33 years a Gregorian year holds two 1 Muharram dates. CE → AJ then
#   returns the larger (most recent) Hijri year. The earlier Javanese year of
#   such a pair has no Gregorian year of its own to round-trip through.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import warnings as py_warnings
from typing import List, Tuple

from petungan.core.constants import JAVANESE_CALENDAR_CONSTANTS, PRECISE_SEARCH_WINDOW
from petungan.core.jdn import (
    gregorian_to_jdn,
    islamic_new_year_jdn,
    jdn_to_gregorian,
    jdn_to_islamic,
)
from petungan.core.validation import CalendarRangeError, PreReformYearWarning, require_year

log = logging.getLogger(__name__)

__all__ = [
    "jawa_to_gregorian_precise",
    "gregorian_to_jawa_precise",
]

_C = JAVANESE_CALENDAR_CONSTANTS

# ───────────────────────────── Javanese → Gregorian ─────────────────────────────

def jawa_to_gregorian_precise(jawa_year: int) -> int:
    """
    Gregorian year in which 1 Sura of ``jawa_year`` falls.

    Years before 1555 AJ are computed but flagged with PreReformYearWarning:
    the 512-year Hijri offset only holds from the 1633 reform onward.

    Raises:
        InvalidYearError: non-integer input
        CalendarRangeError: the matching Hijri year is before 1 AH
    """
    jawa_year = require_year(jawa_year, "Javanese")

    if jawa_year < _C.BASE_JAWA:
        py_warnings.warn(
            f"Javanese year {jawa_year} is before calendar standardization "
            f"({_C.BASE_JAWA}); precise conversion may not be historically accurate.",
            PreReformYearWarning,
            stacklevel=2,
        )

    hijri_year = jawa_year - _C.HIJRI_OFFSET
    new_year = jdn_to_gregorian(islamic_new_year_jdn(hijri_year))
    log.debug("1 Sura %d AJ (1 Muharram %d AH) = %s", jawa_year, hijri_year, new_year)
    return new_year.year

# ───────────────────────────── Gregorian → Javanese ─────────────────────────────

def _candidate_new_years(hijri_anchor: int) -> List[Tuple[int, int]]:
    """(hijri_year, new_year_jdn) pairs in the search window around an anchor."""
    first = max(hijri_anchor - PRECISE_SEARCH_WINDOW, 1)
    last = hijri_anchor + PRECISE_SEARCH_WINDOW
    if last < first:
        raise CalendarRangeError(
            f"No Hijri year on or after 1 AH near anchor year {hijri_anchor}"
        )
    return [(h, islamic_new_year_jdn(h)) for h in range(first, last + 1)]

def gregorian_to_jawa_precise(gregorian_year: int) -> int:
    """
    Javanese year whose 1 Sura falls within ``gregorian_year``.

    When the Gregorian year contains two New Years the larger Hijri year wins.
    When it contains none, the Hijri year whose New Year lies closest to the
    Gregorian year is used, again preferring the larger year on ties.

    Raises:
        InvalidYearError: non-integer input
        CalendarRangeError: no Hijri year on or after 1 AH is in range
    """
    gregorian_year = require_year(gregorian_year, "Gregorian")

    if gregorian_year < _C.BASE_GREGORIAN:
        py_warnings.warn(
            f"Gregorian year {gregorian_year} is before calendar standardization "
            f"({_C.BASE_GREGORIAN}); precise conversion may not be historically accurate.",
            PreReformYearWarning,
            stacklevel=2,
        )

    span_start = gregorian_to_jdn(gregorian_year, 1, 1)
    span_end = gregorian_to_jdn(gregorian_year, 12, 31)
    candidates = _candidate_new_years(jdn_to_islamic(span_start).year)

    matches = [h for h, jdn in candidates if span_start <= jdn <= span_end]
    if matches:
        if len(matches) > 1:
            log.debug("Gregorian year %d holds New Years of %s AH", gregorian_year, matches)
        hijri_year = max(matches)
    else:
        def distance(candidate: Tuple[int, int]) -> Tuple[int, int]:
            h, jdn = candidate
            if jdn < span_start:
                gap = span_start - jdn
            elif jdn > span_end:
                gap = jdn - span_end
            else:
                gap = 0
            return gap, -h

        hijri_year = min(candidates, key=distance)[0]
        log.debug("No 1 Muharram within %d; nearest is %d AH", gregorian_year, hijri_year)

    return hijri_year + _C.HIJRI_OFFSET
