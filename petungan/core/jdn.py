# petungan/core/jdn.py
# -----------------------------------------------------------------------------
# Julian Day Number Converters (Gregorian & Tabular Islamic)
#
# Algorithms:
#   • Gregorian: Fliegel–Van Flandern integer formula, floor division
#     throughout so proleptic and negative years stay exact
#   • Islamic: civil (tabular) calendar, alternating 30/29-day months,
#     leap days from floor((11y + 3) / 30) over the 30-year cycle
#
# Guarantees:
#   • gregorian_to_jdn(*jdn_to_gregorian(n)) == n for every integer n
#   • islamic_to_jdn is exact for Hijri years >= 1; jdn_to_islamic is an
#     estimate-and-correct inverse whose month can be off by one at rare
#     boundaries (the year field is what the engines consume)
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from typing import NamedTuple

from petungan.core.validation import CalendarRangeError

__all__ = [
    "CivilDate",
    "ISLAMIC_EPOCH_JDN",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "islamic_to_jdn",
    "jdn_to_islamic",
    "islamic_new_year_jdn",
]

# 1 Muharram 1 AH = 16 Jul 622 Julian = 19 Jul 622 proleptic Gregorian
ISLAMIC_EPOCH_JDN = 1948440

MEAN_MONTH_DAYS = 29.5
TABULAR_CYCLE_DAYS = 10631       # Days in the 30-year tabular cycle
TABULAR_CYCLE_YEARS = 30

# ───────────────────────────── Data Structures ─────────────────────────────

class CivilDate(NamedTuple):
    """Calendar date produced by a JDN converter."""
    year: int
    month: int
    day: int

# ───────────────────────────── Gregorian ─────────────────────────────

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian date."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045

def jdn_to_gregorian(jdn: int) -> CivilDate:
    """Proleptic Gregorian date of a Julian Day Number (exact inverse)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return CivilDate(year, month, day)

# ───────────────────────────── Tabular Islamic ─────────────────────────────

def islamic_to_jdn(year: int, month: int, day: int) -> int:
    """
    Julian Day Number of a tabular Islamic date.

    Month and day are not range-checked; out-of-range values give a
    numerically defined but calendrically meaningless JDN.

    Raises:
        CalendarRangeError: year is before 1 AH
    """
    if year < 1:
        raise CalendarRangeError(
            f"Hijri year {year} is before the tabular Islamic epoch (1 AH)"
        )

    return (
        day
        + math.ceil(MEAN_MONTH_DAYS * (month - 1))
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + ISLAMIC_EPOCH_JDN - 1
    )

def jdn_to_islamic(jdn: int) -> CivilDate:
    """
    Tabular Islamic date of a Julian Day Number.

    The year is estimated from the 30-year cycle; the month comes from a
    ceiling division against a 29.5-day month and the day is back-computed
    from that month's first day.
    """
    year = (TABULAR_CYCLE_YEARS * (jdn - ISLAMIC_EPOCH_JDN) + 10646) // TABULAR_CYCLE_DAYS
    month = min(
        12,
        math.ceil((jdn - (29 + islamic_to_jdn(year, 1, 1))) / MEAN_MONTH_DAYS) + 1,
    )
    day = jdn - islamic_to_jdn(year, month, 1) + 1
    return CivilDate(year, month, day)

def islamic_new_year_jdn(hijri_year: int) -> int:
    """JDN of 1 Muharram (1 Sura) of ``hijri_year``."""
    return islamic_to_jdn(hijri_year, 1, 1)
