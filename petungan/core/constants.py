# petungan/core/constants.py
# -----------------------------------------------------------------------------
# Calendar Constants & Conversion Configuration
#
# Reference Point:
#   • Sultan Agung's reform: 1 Sura 1555 AJ = 1 Muharram 1043 AH = 8 Jul 1633 CE
#   • Javanese and Hijri years share New Year's Day (fixed 512-year offset)
#   • Javanese-Gregorian difference shrinks as the lunar year drifts
#
# Drift Model:
#   • Mean solar year: 365.2425 days (Gregorian)
#   • Mean tabular lunar year: 354 11/30 days
#   • Drift per year: 365.2425 - 354.366667 ≈ 10.875833 days
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "CalendarConstants",
    "JAVANESE_CALENDAR_CONSTANTS",
    "Engine",
    "ConversionConfig",
    "DEFAULT_CONVERSION_CONFIG",
    "DIRECT_MAX_ITERATIONS",
    "DIVERGENCE_LIMIT",
    "PRECISE_SEARCH_WINDOW",
    "REFERENCE_TABLE_SIZE",
]

# ───────────────────────────── Reference Constants ─────────────────────────────

@dataclass(frozen=True)
class CalendarConstants:
    """Fixed reference point and derived ratios tying AJ, CE and AH together."""
    BASE_JAWA: int = 1555            # Sultan Agung's calendar reform
    BASE_GREGORIAN: int = 1633       # Gregorian year of 1 Sura 1555
    BASE_HIJRI: int = 1043           # Hijri year of 1 Sura 1555
    INITIAL_DIFFERENCE: int = 78     # Gregorian - Javanese at the base year
    CYCLE_LENGTH: int = 34           # Years per legacy table band
    DIFFERENCE_DECAY: int = 1        # Difference lost per band
    MIN_DIFFERENCE: int = 1          # Floor for the Gregorian - Javanese difference
    HIJRI_OFFSET: int = 512          # Javanese - Hijri, constant for all years
    SOLAR_YEAR_DAYS: float = 365.2425
    DRIFT_PER_YEAR: float = 10.875833

    def __post_init__(self) -> None:
        if self.BASE_JAWA - self.BASE_HIJRI != self.HIJRI_OFFSET:
            raise ValueError(
                f"BASE_JAWA - BASE_HIJRI must equal HIJRI_OFFSET "
                f"({self.BASE_JAWA} - {self.BASE_HIJRI} != {self.HIJRI_OFFSET})"
            )
        if self.BASE_GREGORIAN - self.BASE_JAWA != self.INITIAL_DIFFERENCE:
            raise ValueError(
                f"BASE_GREGORIAN - BASE_JAWA must equal INITIAL_DIFFERENCE "
                f"({self.BASE_GREGORIAN} - {self.BASE_JAWA} != {self.INITIAL_DIFFERENCE})"
            )

JAVANESE_CALENDAR_CONSTANTS = CalendarConstants()

# Algorithm limits
DIRECT_MAX_ITERATIONS = 10       # Fixed-point steps in the Direct inverse
DIVERGENCE_LIMIT = 1000          # |error| in years that aborts the Direct inverse
PRECISE_SEARCH_WINDOW = 2        # Hijri years scanned either side of 1 January
REFERENCE_TABLE_SIZE = 78        # Bands in the legacy reference table

# ───────────────────────────── Facade Configuration ─────────────────────────────

class Engine(Enum):
    """Year conversion engines."""
    PRECISE = "precise"    # JDN-based, tabular Islamic calendar
    DIRECT = "direct"      # Closed-form drift approximation

    @property
    def alternate(self) -> "Engine":
        return Engine.DIRECT if self is Engine.PRECISE else Engine.PRECISE

@dataclass(frozen=True)
class ConversionConfig:
    """Engine selection for the Javanese-Gregorian facade."""
    primary_engine: Engine = Engine.PRECISE
    enable_fallback: bool = True

DEFAULT_CONVERSION_CONFIG = ConversionConfig()
