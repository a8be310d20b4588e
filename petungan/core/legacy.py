# petungan/core/legacy.py
# -----------------------------------------------------------------------------
# Legacy Reference Table - Arithmetic Reconstruction
#
# Predecessor releases shipped a 78-row table of 34-year bands, each carrying
# the Gregorian - Javanese difference ("konstan") valid inside it. The table
# is regenerated here from the calendar constants instead of being stored,
# and lookups compute the band analytically rather than searching rows.
#
# Legacy API (deprecated, kept for table-based consumers):
#   build_reference_table(base_year) -> List[ReferenceInterval]
#   find_reference_interval(table, year) -> Optional[ReferenceInterval]
#   build_javanese_reference_table() / build_gregorian_reference_table()
#   find_javanese_reference(year) / find_gregorian_reference(year)
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import warnings as py_warnings
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from petungan.core.constants import JAVANESE_CALENDAR_CONSTANTS, REFERENCE_TABLE_SIZE
from petungan.core.validation import require_year

log = logging.getLogger(__name__)

__all__ = [
    "ReferenceInterval",
    "build_reference_table",
    "find_reference_interval",
    "build_javanese_reference_table",
    "build_gregorian_reference_table",
    "find_javanese_reference",
    "find_gregorian_reference",
]

_C = JAVANESE_CALENDAR_CONSTANTS

# Key names used for a band's first year by table consumers
_START_YEAR_KEYS = ("start_year", "startYear", "tahunAwal")

# ───────────────────────────── Data Structures ─────────────────────────────

@dataclass(frozen=True)
class ReferenceInterval:
    """One 34-year band of the reconstructed reference table."""
    constant: int
    start_year: int
    end_year: int

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and self.start_year <= year <= self.end_year

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def to_legacy_dict(self) -> Dict[str, int]:
        """Row in the predecessor's key layout."""
        return {
            "konstan": self.constant,
            "tahunAwal": self.start_year,
            "tahunAkhir": self.end_year,
        }

# ───────────────────────────── Band Arithmetic ─────────────────────────────

def _band(base_year: int, index: int) -> ReferenceInterval:
    """Band ``index`` of a table starting at ``base_year`` (negative = before base)."""
    constant = max(_C.INITIAL_DIFFERENCE - index * _C.DIFFERENCE_DECAY, _C.MIN_DIFFERENCE)
    start = base_year + index * _C.CYCLE_LENGTH
    return ReferenceInterval(constant, start, start + _C.CYCLE_LENGTH - 1)

def _table_base_year(table: Sequence[Any]) -> int:
    """First entry's start year, from a ReferenceInterval or a mapping row."""
    first = table[0]
    if isinstance(first, ReferenceInterval):
        return first.start_year
    if isinstance(first, Mapping):
        for key in _START_YEAR_KEYS:
            if key in first:
                return int(first[key])
        raise KeyError(f"table row has none of {_START_YEAR_KEYS}")
    return int(first.start_year)

def _build_table(base_year: int) -> List[ReferenceInterval]:
    return [_band(base_year, index) for index in range(REFERENCE_TABLE_SIZE)]

def _find_interval(table: Sequence[Any], year: int) -> Optional[ReferenceInterval]:
    try:
        base_year = _table_base_year(table)
    except (IndexError, KeyError, TypeError, ValueError, AttributeError) as e:
        log.debug("Cannot derive table base year: %s", e)
        return None
    return _band(base_year, (year - base_year) // _C.CYCLE_LENGTH)

def _warn_legacy(name: str) -> None:
    py_warnings.warn(
        f"{name}() is part of the legacy table API. "
        "Use jawa_to_gregorian() / gregorian_to_jawa() for new code.",
        DeprecationWarning,
        stacklevel=3,
    )

# ───────────────────────────── Legacy API ─────────────────────────────

def build_reference_table(base_year: int) -> List[ReferenceInterval]:
    """
    DEPRECATED: Reconstruct the 78-band reference table starting at ``base_year``.

    Each band spans 34 years; the constant starts at 78 and drops by one per
    band, never below 1.
    """
    _warn_legacy("build_reference_table")
    return _build_table(require_year(base_year, "base"))

def find_reference_interval(table: Sequence[Any], year: int) -> Optional[ReferenceInterval]:
    """
    DEPRECATED: Band of ``table`` containing ``year``.

    The table's base is its first row's start year; the band itself is
    computed, not looked up, so any integer year gets an answer, including
    years outside the 78 stored rows.

    Returns:
        The computed ReferenceInterval, or None when ``table`` is empty or
        its first row carries no start year.
    """
    _warn_legacy("find_reference_interval")
    return _find_interval(table, require_year(year, "reference"))

def build_javanese_reference_table() -> List[ReferenceInterval]:
    """DEPRECATED: Reference table based at 1555 AJ."""
    _warn_legacy("build_javanese_reference_table")
    return _build_table(_C.BASE_JAWA)

def build_gregorian_reference_table() -> List[ReferenceInterval]:
    """DEPRECATED: Reference table based at 1633 CE."""
    _warn_legacy("build_gregorian_reference_table")
    return _build_table(_C.BASE_GREGORIAN)

def find_javanese_reference(year: int) -> Optional[ReferenceInterval]:
    _warn_legacy("find_javanese_reference")
    return _find_interval(_build_table(_C.BASE_JAWA), require_year(year, "Javanese"))

def find_gregorian_reference(year: int) -> Optional[ReferenceInterval]:
    _warn_legacy("find_gregorian_reference")
    return _find_interval(_build_table(_C.BASE_GREGORIAN), require_year(year, "Gregorian"))
