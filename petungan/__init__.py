"""
petungan - Javanese Calendar Year Conversion

Converts years between the Javanese (AJ), Gregorian (CE) and Hijri (AH)
calendars, anchored at Sultan Agung's 1633 reform (1555 AJ = 1043 AH).
"""

__version__ = "2.0.0"
__author__ = "Kalender Jawa"

# Version information
VERSION_INFO = {
    "major": 2,
    "minor": 0,
    "patch": 0,
    "status": "stable"
}

from .core import (
    JAVANESE_CALENDAR_CONSTANTS,
    CalendarConstants,
    ConversionConfig,
    Engine,
    PetunganError,
    InvalidYearError,
    ConversionDivergenceError,
    CalendarRangeError,
    PreReformYearWarning,
    EngineFallbackWarning,
    CivilDate,
    gregorian_to_jdn,
    jdn_to_gregorian,
    islamic_to_jdn,
    jdn_to_islamic,
    jawa_to_gregorian_precise,
    gregorian_to_jawa_precise,
    jawa_to_gregorian_direct,
    gregorian_to_jawa_direct,
    ReferenceInterval,
    build_reference_table,
    find_reference_interval,
    build_javanese_reference_table,
    build_gregorian_reference_table,
    find_javanese_reference,
    find_gregorian_reference,
    jawa_to_gregorian,
    gregorian_to_jawa,
    jawa_to_hijri,
    hijri_to_jawa,
)
from .core.diagnostics import run_self_check

__all__ = [
    # Primary API
    "jawa_to_gregorian",
    "gregorian_to_jawa",
    "jawa_to_hijri",
    "hijri_to_jawa",
    "jawa_to_gregorian_precise",
    "gregorian_to_jawa_precise",
    "jawa_to_gregorian_direct",
    "gregorian_to_jawa_direct",
    "JAVANESE_CALENDAR_CONSTANTS",
    "CalendarConstants",
    "ConversionConfig",
    "Engine",
    # Julian Day Numbers
    "CivilDate",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "islamic_to_jdn",
    "jdn_to_islamic",
    # Errors and warnings
    "PetunganError",
    "InvalidYearError",
    "ConversionDivergenceError",
    "CalendarRangeError",
    "PreReformYearWarning",
    "EngineFallbackWarning",
    # Legacy table API (deprecated)
    "ReferenceInterval",
    "build_reference_table",
    "find_reference_interval",
    "build_javanese_reference_table",
    "build_gregorian_reference_table",
    "find_javanese_reference",
    "find_gregorian_reference",
    # Diagnostics
    "run_self_check",
]
