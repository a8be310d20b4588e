# petungan/core/conversion.py
# -----------------------------------------------------------------------------
# Year Conversion Facade
#
# Design Principles:
#   • One stable entry point per calendar pair
#   • Precise engine first, Direct engine as fallback (configurable)
#   • Invalid input is never recovered; engine failures are
#   • Every fallback is announced with EngineFallbackWarning
#
# Javanese ↔ Hijri is pure offset arithmetic (512 years) and needs no engine.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import warnings as py_warnings
from typing import Callable, Dict, Optional

from petungan.core.constants import (
    DEFAULT_CONVERSION_CONFIG,
    JAVANESE_CALENDAR_CONSTANTS,
    ConversionConfig,
    Engine,
)
from petungan.core.direct import gregorian_to_jawa_direct, jawa_to_gregorian_direct
from petungan.core.precise import gregorian_to_jawa_precise, jawa_to_gregorian_precise
from petungan.core.validation import (
    EngineFallbackWarning,
    PreReformYearWarning,
    require_year,
)

log = logging.getLogger(__name__)

__all__ = [
    "jawa_to_gregorian",
    "gregorian_to_jawa",
    "jawa_to_hijri",
    "hijri_to_jawa",
]

_C = JAVANESE_CALENDAR_CONSTANTS

_EngineFunc = Callable[[int], int]

_JAWA_TO_GREGORIAN: Dict[Engine, _EngineFunc] = {
    Engine.PRECISE: jawa_to_gregorian_precise,
    Engine.DIRECT: jawa_to_gregorian_direct,
}

_GREGORIAN_TO_JAWA: Dict[Engine, _EngineFunc] = {
    Engine.PRECISE: gregorian_to_jawa_precise,
    Engine.DIRECT: gregorian_to_jawa_direct,
}

# ───────────────────────────── Engine Selection ─────────────────────────────

def _convert_with_fallback(
    engines: Dict[Engine, _EngineFunc],
    year: int,
    label: str,
    config: ConversionConfig,
) -> int:
    """Run the primary engine and, if allowed, the alternate one on failure."""
    primary = config.primary_engine
    try:
        return engines[primary](year)
    except Exception as e:
        if not config.enable_fallback:
            raise

        fallback = primary.alternate
        message = (
            f"{primary.value} conversion failed for {label} year {year} ({e}); "
            f"falling back to {fallback.value} engine"
        )
        log.warning(message)
        py_warnings.warn(message, EngineFallbackWarning, stacklevel=3)

        try:
            return engines[fallback](year)
        except Exception as fallback_error:
            raise fallback_error from e

def _resolve(config: Optional[ConversionConfig]) -> ConversionConfig:
    return config if config is not None else DEFAULT_CONVERSION_CONFIG

# ───────────────────────────── Javanese ↔ Gregorian ─────────────────────────────

def jawa_to_gregorian(jawa_year: int, *, config: Optional[ConversionConfig] = None) -> int:
    """
    Convert a Javanese year to the Gregorian year of its 1 Sura.

    Args:
        jawa_year: Javanese (AJ) year
        config: engine selection; Precise with Direct fallback by default

    Returns:
        Gregorian (CE) year

    Raises:
        InvalidYearError: non-integer input
    """
    jawa_year = require_year(jawa_year, "Javanese")
    return _convert_with_fallback(_JAWA_TO_GREGORIAN, jawa_year, "Javanese", _resolve(config))

def gregorian_to_jawa(gregorian_year: int, *, config: Optional[ConversionConfig] = None) -> int:
    """
    Convert a Gregorian year to the Javanese year whose 1 Sura it contains.

    Args:
        gregorian_year: Gregorian (CE) year
        config: engine selection; Precise with Direct fallback by default

    Returns:
        Javanese (AJ) year

    Raises:
        InvalidYearError: non-integer input
    """
    gregorian_year = require_year(gregorian_year, "Gregorian")
    return _convert_with_fallback(_GREGORIAN_TO_JAWA, gregorian_year, "Gregorian", _resolve(config))

# ───────────────────────────── Javanese ↔ Hijri ─────────────────────────────

def jawa_to_hijri(jawa_year: int) -> int:
    """Hijri year sharing New Year's Day with ``jawa_year`` (offset 512)."""
    jawa_year = require_year(jawa_year, "Javanese")

    if jawa_year < _C.BASE_JAWA:
        py_warnings.warn(
            f"Warning: Javanese year {jawa_year} is before calendar standardization "
            f"({_C.BASE_JAWA}). Conversion may not be historically accurate.",
            PreReformYearWarning,
            stacklevel=2,
        )

    return jawa_year - _C.HIJRI_OFFSET

def hijri_to_jawa(hijri_year: int) -> int:
    """Javanese year sharing New Year's Day with ``hijri_year`` (offset 512)."""
    hijri_year = require_year(hijri_year, "Hijri")

    if hijri_year < _C.BASE_HIJRI:
        py_warnings.warn(
            f"Warning: Hijri year {hijri_year} is before Javanese calendar correlation "
            f"({_C.BASE_HIJRI}). Conversion may not be historically accurate.",
            PreReformYearWarning,
            stacklevel=2,
        )

    return hijri_year + _C.HIJRI_OFFSET
