# petungan/core/diagnostics.py
# -----------------------------------------------------------------------------
# Conversion Self-Check & Cross-Validation
#
# Key Features:
#   • Reference points: documented 1 Sura dates checked against both engines
#   • Engine agreement: Direct vs Precise over a Javanese year range
#   • Round-trip audit: Precise AJ → CE → AJ and CE → AJ → CE
#   • ERFA cross-validation of the Gregorian JDN converter (cal2jd / jd2cal)
#   • Timing and memory profiling of every check (psutil)
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
import warnings as py_warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

import erfa
import psutil

from petungan.core.conversion import gregorian_to_jawa, jawa_to_gregorian
from petungan.core.direct import jawa_to_gregorian_direct
from petungan.core.jdn import gregorian_to_jdn, jdn_to_gregorian
from petungan.core.precise import gregorian_to_jawa_precise, jawa_to_gregorian_precise
from petungan.core.validation import PreReformYearWarning

log = logging.getLogger(__name__)

__all__ = [
    "REFERENCE_POINTS",
    "DiagnosticsConfig",
    "SystemStatus",
    "RoundTripDirection",
    "AgreementReport",
    "CheckResult",
    "SelfCheckResult",
    "PerformanceProfiler",
    "compare_engines",
    "round_trip_failures",
    "shares_gregorian_year",
    "cross_validate_jdn",
    "run_self_check",
]

# (javanese_year, gregorian_year, note) - date of 1 Sura per almnk.com
REFERENCE_POINTS: Tuple[Tuple[int, int, str], ...] = (
    (1555, 1633, "Sultan Agung reform epoch (8 Jul 1633)"),
    (1900, 1968, "1 Suro 1900 = 31 Mar 1968"),
    (1933, 2000, "1 Suro 1933 = 6 Apr 2000"),
    (1946, 2012, "1 Suro 1946 = 15 Nov 2012"),
    (1950, 2016, "1 Suro 1950 = 3 Oct 2016"),
    (1955, 2021, "1 Suro 1955 = 10 Aug 2021"),
    (1956, 2022, "1 Suro 1956 = 30 Jul 2022"),
    (1957, 2023, "1 Suro 1957 = 19 Jul 2023"),
    (1958, 2024, "1 Suro 1958 = 8 Jul 2024"),
    (1959, 2025, "1 Suro 1959 = 27 Jun 2025"),
)

# ERFA calendar routines reject years before this
ERFA_MIN_YEAR = -4799

# ───────────────────────────── Configuration & Results ─────────────────────────────

class SystemStatus(Enum):
    """Overall conversion health."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    FAILED = "failed"

class RoundTripDirection(Enum):
    JAWA = "jawa"              # AJ → CE → AJ
    GREGORIAN = "gregorian"    # CE → AJ → CE

@dataclass(frozen=True)
class DiagnosticsConfig:
    """Ranges and thresholds for the self-check."""
    jawa_range: Tuple[int, int] = (1555, 2100)
    gregorian_range: Tuple[int, int] = (1633, 2100)
    min_agreement_rate: float = 95.0       # percent
    max_engine_difference: int = 1         # years
    max_gregorian_round_trip_failures: int = 5
    cross_validate_erfa: bool = True
    enable_profiling: bool = True

@dataclass(frozen=True)
class AgreementReport:
    """Direct vs Precise comparison over a Javanese year range."""
    start_year: int
    end_year: int
    total: int
    agreed: int
    max_difference: int
    disagreements: List[Tuple[int, int, int]] = field(default_factory=list)  # (jawa, direct, precise)

    @property
    def agreement_rate(self) -> float:
        """Percentage of years where both engines give the same answer."""
        return 100.0 * self.agreed / self.total if self.total else 100.0

@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single self-check."""
    name: str
    passed: bool
    critical: bool
    execution_time_ms: float
    memory_usage_mb: float
    detail: str = ""

@dataclass(frozen=True)
class SelfCheckResult:
    """Complete self-check result."""
    status: SystemStatus
    config_used: DiagnosticsConfig
    checks: List[CheckResult]
    agreement: AgreementReport
    jawa_round_trip_failures: List[int]
    gregorian_round_trip_failures: List[int]
    erfa_issues: List[str]
    total_execution_time_ms: float
    timestamp: float

    @property
    def failed_checks(self) -> List[CheckResult]:
        return [c for c in self.checks if not c.passed]

# ───────────────────────────── Profiling ─────────────────────────────

class PerformanceProfiler:
    """Wall-clock and resident-memory profiling of a call."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._process = psutil.Process() if enabled else None

    def _memory_mb(self) -> float:
        if self._process is None:
            return 0.0
        return self._process.memory_info().rss / 1024 / 1024

    def profile_function(self, func: Callable[..., Any], *args, **kwargs) -> Tuple[Any, float, float]:
        """Call ``func`` and return (result, time_ms, memory_mb)."""
        start_memory = self._memory_mb()
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = (time.perf_counter() - start_time) * 1000.0
        memory_usage = self._memory_mb() - start_memory
        return result, execution_time, max(0.0, memory_usage)

# ───────────────────────────── Checks ─────────────────────────────

def compare_engines(start_year: int, end_year: int) -> AgreementReport:
    """Compare Direct and Precise AJ → CE results for every year in [start, end]."""
    agreed = 0
    max_difference = 0
    disagreements = []

    with py_warnings.catch_warnings():
        py_warnings.simplefilter("ignore", PreReformYearWarning)
        for jawa in range(start_year, end_year + 1):
            direct = jawa_to_gregorian_direct(jawa)
            precise = jawa_to_gregorian_precise(jawa)
            if direct == precise:
                agreed += 1
            else:
                disagreements.append((jawa, direct, precise))
            max_difference = max(max_difference, abs(direct - precise))

    return AgreementReport(
        start_year=start_year,
        end_year=end_year,
        total=end_year - start_year + 1,
        agreed=agreed,
        max_difference=max_difference,
        disagreements=disagreements,
    )

def round_trip_failures(
    start_year: int,
    end_year: int,
    direction: RoundTripDirection = RoundTripDirection.JAWA,
) -> List[int]:
    """Years in [start, end] whose Precise round-trip does not return the input."""
    if direction is RoundTripDirection.JAWA:
        forward, backward = jawa_to_gregorian_precise, gregorian_to_jawa_precise
    else:
        forward, backward = gregorian_to_jawa_precise, jawa_to_gregorian_precise

    failures = []
    with py_warnings.catch_warnings():
        py_warnings.simplefilter("ignore", PreReformYearWarning)
        for year in range(start_year, end_year + 1):
            if backward(forward(year)) != year:
                failures.append(year)
    return failures

def shares_gregorian_year(jawa_year: int) -> bool:
    """True when 1 Sura of ``jawa_year`` and of the next year fall in one Gregorian year."""
    with py_warnings.catch_warnings():
        py_warnings.simplefilter("ignore", PreReformYearWarning)
        return jawa_to_gregorian_precise(jawa_year) == jawa_to_gregorian_precise(jawa_year + 1)

def cross_validate_jdn(years: Iterable[int]) -> List[str]:
    """
    Cross-validate the Gregorian JDN converter against ERFA.

    For 1 January and 31 December of each year, ``gregorian_to_jdn`` is
    compared with ``erfa.cal2jd`` and ``jdn_to_gregorian`` with
    ``erfa.jd2cal``. Years ERFA does not support are reported, not skipped.
    """
    issues = []
    for year in years:
        if year < ERFA_MIN_YEAR:
            issues.append(f"year_{year}_outside_erfa_range")
            continue

        for month, day in ((1, 1), (12, 31)):
            jdn = gregorian_to_jdn(year, month, day)

            djm0, djm = erfa.cal2jd(year, month, day)
            erfa_jdn = int(round(float(djm0) + float(djm) + 0.5))
            if erfa_jdn != jdn:
                issues.append(f"cal2jd_mismatch_{year}-{month:02d}-{day:02d}: {jdn} != {erfa_jdn}")

            iy, im, iday, _ = erfa.jd2cal(float(jdn), 0.0)
            erfa_date = (int(iy), int(im), int(iday))
            if tuple(jdn_to_gregorian(jdn)) != erfa_date:
                issues.append(f"jd2cal_mismatch_{jdn}: {tuple(jdn_to_gregorian(jdn))} != {erfa_date}")

    return issues

def _check_reference_points() -> Tuple[bool, str]:
    mismatches = []
    for jawa, gregorian, note in REFERENCE_POINTS:
        if jawa_to_gregorian(jawa) != gregorian or gregorian_to_jawa(gregorian) != jawa:
            mismatches.append(f"{jawa} AJ ↔ {gregorian} CE ({note})")
    return not mismatches, "; ".join(mismatches)

def _run_check(
    profiler: PerformanceProfiler,
    name: str,
    critical: bool,
    evaluate: Callable[[Any], Tuple[bool, str]],
    func: Callable[..., Any],
    *args,
) -> Tuple[Any, CheckResult]:
    """Profile ``func``, grade its value with ``evaluate`` and wrap the outcome."""
    value, time_ms, memory_mb = profiler.profile_function(func, *args)
    passed, detail = evaluate(value)
    return value, CheckResult(name, passed, critical, time_ms, memory_mb, detail)

# ───────────────────────────── Main API ─────────────────────────────

def run_self_check(config: Optional[DiagnosticsConfig] = None) -> SelfCheckResult:
    """
    Run every conversion check and grade the overall status.

    FAILED if a critical check fails (reference points, engine difference,
    ERFA cross-validation); DEGRADED if only a statistical check fails
    (agreement rate, round-trip budgets); HEALTHY otherwise.
    """
    config = config or DiagnosticsConfig()
    profiler = PerformanceProfiler(enabled=config.enable_profiling)
    started = time.perf_counter()
    checks: List[CheckResult] = []

    log.info("Starting conversion self-check")

    _, check = _run_check(
        profiler, "reference_points", True, lambda outcome: outcome, _check_reference_points,
    )
    checks.append(check)

    agreement, check = _run_check(
        profiler, "engine_difference", True,
        lambda r: (
            r.max_difference <= config.max_engine_difference,
            f"max difference {r.max_difference} years",
        ),
        compare_engines, *config.jawa_range,
    )
    checks.append(check)
    checks.append(CheckResult(
        "engine_agreement_rate",
        agreement.agreement_rate >= config.min_agreement_rate,
        False, 0.0, 0.0,
        f"{agreement.agreed}/{agreement.total} = {agreement.agreement_rate:.1f}%",
    ))

    def evaluate_jawa(failures: List[int]) -> Tuple[bool, str]:
        unexplained = [j for j in failures if not shares_gregorian_year(j)]
        return not unexplained, f"{len(failures)} dual New Year years, unexplained: {unexplained}"

    jawa_failures, check = _run_check(
        profiler, "jawa_round_trip", False, evaluate_jawa,
        round_trip_failures, *config.jawa_range, RoundTripDirection.JAWA,
    )
    checks.append(check)

    gregorian_failures, check = _run_check(
        profiler, "gregorian_round_trip", False,
        lambda failures: (
            len(failures) <= config.max_gregorian_round_trip_failures,
            f"{len(failures)} failures: {failures}",
        ),
        round_trip_failures, *config.gregorian_range, RoundTripDirection.GREGORIAN,
    )
    checks.append(check)

    erfa_issues: List[str] = []
    if config.cross_validate_erfa:
        low = min(config.gregorian_range[0], config.jawa_range[0])
        high = max(config.gregorian_range[1], config.jawa_range[1] + 100)
        erfa_issues, check = _run_check(
            profiler, "erfa_cross_validation", True,
            lambda issues: (not issues, "; ".join(issues[:10])),
            cross_validate_jdn, range(low, high + 1),
        )
        checks.append(check)

    if any(not c.passed and c.critical for c in checks):
        status = SystemStatus.FAILED
    elif any(not c.passed for c in checks):
        status = SystemStatus.DEGRADED
    else:
        status = SystemStatus.HEALTHY

    result = SelfCheckResult(
        status=status,
        config_used=config,
        checks=checks,
        agreement=agreement,
        jawa_round_trip_failures=jawa_failures,
        gregorian_round_trip_failures=gregorian_failures,
        erfa_issues=erfa_issues,
        total_execution_time_ms=(time.perf_counter() - started) * 1000.0,
        timestamp=time.time(),
    )

    log.info(f"Self-check complete - Status: {result.status.value}")
    log.info(f"Engine agreement: {agreement.agreement_rate:.1f}% over {agreement.total} years")
    log.info(f"Total execution time: {result.total_execution_time_ms:.1f}ms")
    for c in result.failed_checks:
        log.warning(f"Failed check {c.name}: {c.detail}")

    return result
