"""Tests for the year conversion facade."""

from __future__ import annotations

import logging
import math
import warnings

import pytest

from petungan import (
    CalendarRangeError,
    ConversionConfig,
    ConversionDivergenceError,
    Engine,
    EngineFallbackWarning,
    InvalidYearError,
    PreReformYearWarning,
    gregorian_to_jawa,
    hijri_to_jawa,
    jawa_to_gregorian,
    jawa_to_hijri,
)

GROUND_TRUTH = [
    (1555, 1633),
    (1933, 2000),
    (1955, 2021),
    (1956, 2022),
    (1957, 2023),
    (1958, 2024),
    (1959, 2025),
]


class TestJawaGregorianFacade:
    """Tests for jawa_to_gregorian and gregorian_to_jawa."""

    @pytest.mark.parametrize("jawa, gregorian", GROUND_TRUTH)
    def test_ground_truth_forward(self, jawa, gregorian) -> None:
        """Documented 1 Sura years convert AJ -> CE."""
        assert jawa_to_gregorian(jawa) == gregorian

    @pytest.mark.parametrize("jawa, gregorian", GROUND_TRUTH)
    def test_ground_truth_reverse(self, jawa, gregorian) -> None:
        """Documented 1 Sura years convert CE -> AJ."""
        assert gregorian_to_jawa(gregorian) == jawa

    def test_no_fallback_inside_domain(self) -> None:
        """Modern years are answered by the primary engine without warnings."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            jawa_to_gregorian(1958)
            gregorian_to_jawa(2024)
        assert caught == []

    def test_falls_back_to_direct_engine(self, quiet_pre_reform) -> None:
        """A Hijri year before 1 AH makes the facade use the direct engine."""
        with pytest.warns(EngineFallbackWarning, match="precise conversion failed for Javanese year 500"):
            assert jawa_to_gregorian(500) == 609

    def test_reverse_falls_back_to_direct_engine(self, quiet_pre_reform) -> None:
        """CE -> AJ before the Islamic epoch also falls back."""
        with pytest.warns(EngineFallbackWarning, match="falling back to direct engine"):
            assert gregorian_to_jawa(600) == 490

    def test_fallback_is_logged(self, quiet_pre_reform, caplog) -> None:
        """Fallbacks are logged at WARNING level."""
        with caplog.at_level(logging.WARNING, logger="petungan.core.conversion"):
            with pytest.warns(EngineFallbackWarning):
                jawa_to_gregorian(500)
        assert any("falling back" in record.getMessage() for record in caplog.records)

    def test_fallback_disabled(self, quiet_pre_reform) -> None:
        """With fallback disabled the primary engine's error propagates."""
        config = ConversionConfig(enable_fallback=False)
        with pytest.raises(CalendarRangeError):
            jawa_to_gregorian(500, config=config)

    def test_direct_primary(self) -> None:
        """The direct engine can be selected as primary."""
        config = ConversionConfig(primary_engine=Engine.DIRECT)
        assert jawa_to_gregorian(1975, config=config) == 2040
        assert jawa_to_gregorian(1975) == 2041
        assert gregorian_to_jawa(2022, config=config) == 1956

    def test_both_engines_fail(self, quiet_pre_reform) -> None:
        """When the fallback fails too, its error is chained to the primary's."""
        with pytest.warns(EngineFallbackWarning):
            with pytest.raises(ConversionDivergenceError) as excinfo:
                gregorian_to_jawa(-1_000_000)
        assert isinstance(excinfo.value.__cause__, CalendarRangeError)

    @pytest.mark.parametrize("value", ["1555", 1555.5, 1555.0, float("nan"), None, True])
    def test_invalid_jawa_year(self, value) -> None:
        """Non-integer AJ input is rejected and never falls back."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", EngineFallbackWarning)
            with pytest.raises(InvalidYearError, match="Invalid Javanese year"):
                jawa_to_gregorian(value)

    @pytest.mark.parametrize("value", ["2024", 2024.5, None, False])
    def test_invalid_gregorian_year(self, value) -> None:
        """Non-integer CE input is rejected."""
        with pytest.raises(InvalidYearError, match="Invalid Gregorian year"):
            gregorian_to_jawa(value)

    def test_invalid_year_is_type_error(self) -> None:
        """InvalidYearError can be caught as TypeError."""
        with pytest.raises(TypeError):
            jawa_to_gregorian(math.pi)

    def test_error_names_type(self) -> None:
        """The message names the rejected type."""
        with pytest.raises(InvalidYearError, match="got str"):
            jawa_to_gregorian("1955")


class TestHijriOffset:
    """Tests for jawa_to_hijri and hijri_to_jawa."""

    def test_reference_point(self) -> None:
        """1555 AJ and 1043 AH share a New Year."""
        assert jawa_to_hijri(1555) == 1043
        assert hijri_to_jawa(1043) == 1555

    def test_modern_year(self) -> None:
        """1958 AJ is 1446 AH."""
        assert jawa_to_hijri(1958) == 1446
        assert hijri_to_jawa(1446) == 1958

    def test_reversible(self, quiet_pre_reform) -> None:
        """The offset is exact in both directions for any integer."""
        for year in range(-100, 3000, 7):
            assert hijri_to_jawa(jawa_to_hijri(year)) == year
            assert jawa_to_hijri(hijri_to_jawa(year)) == year

    def test_pre_reform_jawa(self) -> None:
        """Years before 1555 AJ are converted with a warning."""
        with pytest.warns(PreReformYearWarning, match="Javanese year 1500"):
            assert jawa_to_hijri(1500) == 988

    def test_pre_reform_hijri(self) -> None:
        """Years before 1043 AH are converted with a warning."""
        with pytest.warns(PreReformYearWarning, match="Hijri year 1000"):
            assert hijri_to_jawa(1000) == 1512

    @pytest.mark.parametrize("value", ["1043", 1043.0, None])
    def test_invalid_hijri_year(self, value) -> None:
        """Non-integer AH input is rejected."""
        with pytest.raises(InvalidYearError, match="Invalid Hijri year"):
            hijri_to_jawa(value)
