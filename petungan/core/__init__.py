"""
Core year-conversion engines.

This package contains the calendar constants, the Julian Day Number
converters, the Precise and Direct engines, the legacy reference table and
the facade that ties them together.
"""

from .constants import (
    JAVANESE_CALENDAR_CONSTANTS,
    CalendarConstants,
    ConversionConfig,
    Engine,
)
from .validation import (
    PetunganError,
    InvalidYearError,
    ConversionDivergenceError,
    CalendarRangeError,
    PreReformYearWarning,
    EngineFallbackWarning,
)
from .jdn import CivilDate, gregorian_to_jdn, jdn_to_gregorian, islamic_to_jdn, jdn_to_islamic
from .precise import jawa_to_gregorian_precise, gregorian_to_jawa_precise
from .direct import jawa_to_gregorian_direct, gregorian_to_jawa_direct
from .legacy import (
    ReferenceInterval,
    build_reference_table,
    find_reference_interval,
    build_javanese_reference_table,
    build_gregorian_reference_table,
    find_javanese_reference,
    find_gregorian_reference,
)
from .conversion import jawa_to_gregorian, gregorian_to_jawa, jawa_to_hijri, hijri_to_jawa

__all__ = [
    "JAVANESE_CALENDAR_CONSTANTS",
    "CalendarConstants",
    "ConversionConfig",
    "Engine",
    "PetunganError",
    "InvalidYearError",
    "ConversionDivergenceError",
    "CalendarRangeError",
    "PreReformYearWarning",
    "EngineFallbackWarning",
    "CivilDate",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "islamic_to_jdn",
    "jdn_to_islamic",
    "jawa_to_gregorian_precise",
    "gregorian_to_jawa_precise",
    "jawa_to_gregorian_direct",
    "gregorian_to_jawa_direct",
    "ReferenceInterval",
    "build_reference_table",
    "find_reference_interval",
    "build_javanese_reference_table",
    "build_gregorian_reference_table",
    "find_javanese_reference",
    "find_gregorian_reference",
    "jawa_to_gregorian",
    "gregorian_to_jawa",
    "jawa_to_hijri",
    "hijri_to_jawa",
]
