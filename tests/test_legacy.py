"""Tests for the reconstructed legacy reference table."""

from __future__ import annotations

import warnings

import pytest

from petungan import (
    InvalidYearError,
    ReferenceInterval,
    build_gregorian_reference_table,
    build_javanese_reference_table,
    build_reference_table,
    find_gregorian_reference,
    find_javanese_reference,
    find_reference_interval,
    gregorian_to_jawa_direct,
)


@pytest.fixture(autouse=True)
def _ignore_deprecations():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        yield


class TestBuildReferenceTable:
    """Tests for build_reference_table."""

    def test_length(self) -> None:
        """Tables always hold 78 bands."""
        assert len(build_reference_table(1555)) == 78
        assert len(build_javanese_reference_table()) == 78
        assert len(build_gregorian_reference_table()) == 78

    def test_first_entry(self) -> None:
        """The first band starts at the base with constant 78."""
        assert build_reference_table(1555)[0] == ReferenceInterval(78, 1555, 1588)

    def test_bands_are_contiguous(self) -> None:
        """Each band starts the year after the previous one ends."""
        table = build_reference_table(1633)
        for previous, current in zip(table, table[1:]):
            assert current.start_year == previous.end_year + 1
            assert current.end_year - current.start_year == 33

    def test_constant_decays_to_floor(self) -> None:
        """The constant drops by one per band and ends at the floor of 1."""
        constants = [band.constant for band in build_reference_table(1555)]
        assert constants == list(range(78, 0, -1))

    def test_wrappers_use_calendar_bases(self) -> None:
        """The Javanese and Gregorian tables start at 1555 and 1633."""
        assert build_javanese_reference_table()[0].start_year == 1555
        assert build_gregorian_reference_table()[0].start_year == 1633

    def test_deprecated(self) -> None:
        """The legacy API announces its deprecation."""
        with warnings.catch_warnings():
            warnings.simplefilter("default")
            with pytest.deprecated_call():
                build_reference_table(1555)

    def test_rejects_non_integer_base(self) -> None:
        """Base year must be an integer."""
        with pytest.raises(InvalidYearError):
            build_reference_table("1555")


class TestFindReferenceInterval:
    """Tests for find_reference_interval and its wrappers."""

    def test_base_year(self) -> None:
        """The base year sits in the first band."""
        result = find_reference_interval(build_javanese_reference_table(), 1555)
        assert result == ReferenceInterval(78, 1555, 1588)

    def test_javanese_2000(self) -> None:
        """2000 AJ falls in band 13 (constant 65)."""
        result = find_reference_interval(build_javanese_reference_table(), 2000)
        assert result == ReferenceInterval(65, 1997, 2030)

    def test_gregorian_2022(self) -> None:
        """2022 CE has constant 67."""
        assert find_reference_interval(build_gregorian_reference_table(), 2022).constant == 67

    def test_year_before_base(self) -> None:
        """Years before the base fall into bands extended backwards."""
        result = find_reference_interval(build_javanese_reference_table(), 1554)
        assert result == ReferenceInterval(79, 1521, 1554)
        result = find_reference_interval(build_javanese_reference_table(), 1521)
        assert result == ReferenceInterval(79, 1521, 1554)

    def test_far_future_year(self) -> None:
        """Years beyond the 78 bands still get an interval, floored at 1."""
        result = find_reference_interval(build_javanese_reference_table(), 999999)
        assert result is not None
        assert result.constant == 1
        assert 999999 in result

    def test_base_comes_from_table(self) -> None:
        """The same year resolves differently against differently based tables."""
        javanese = find_reference_interval(build_javanese_reference_table(), 1600)
        gregorian = find_reference_interval(build_gregorian_reference_table(), 1600)
        assert javanese.start_year == 1589
        assert gregorian.start_year == 1599

    def test_mapping_rows(self) -> None:
        """Tables in the predecessor's dict layout are accepted."""
        table = [band.to_legacy_dict() for band in build_gregorian_reference_table()]
        assert find_reference_interval(table, 2022) == find_gregorian_reference(2022)

    def test_unusable_table_returns_none(self) -> None:
        """An empty or malformed table yields None."""
        assert find_reference_interval([], 2000) is None
        assert find_reference_interval([{"year": 1555}], 2000) is None
        assert find_reference_interval(None, 2000) is None

    def test_wrappers(self) -> None:
        """Calendar-specific lookups use their own base year."""
        assert find_javanese_reference(1555).constant == 78
        assert find_gregorian_reference(1633).constant == 78

    def test_consistent_with_direct_engine(self) -> None:
        """Table-derived and direct CE -> AJ results are within one year."""
        band = find_gregorian_reference(2000)
        assert abs((2000 - band.constant) - gregorian_to_jawa_direct(2000)) <= 1

    def test_rejects_non_integer_year(self) -> None:
        """Query year must be an integer."""
        with pytest.raises(InvalidYearError):
            find_reference_interval(build_javanese_reference_table(), 2000.5)


class TestReferenceInterval:
    """Tests for the ReferenceInterval value type."""

    def test_to_dict(self) -> None:
        """to_dict uses field names."""
        band = ReferenceInterval(78, 1555, 1588)
        assert band.to_dict() == {"constant": 78, "start_year": 1555, "end_year": 1588}

    def test_to_legacy_dict(self) -> None:
        """to_legacy_dict uses the predecessor's key names."""
        band = ReferenceInterval(78, 1555, 1588)
        assert band.to_legacy_dict() == {"konstan": 78, "tahunAwal": 1555, "tahunAkhir": 1588}

    def test_contains(self) -> None:
        """Membership covers the inclusive band."""
        band = ReferenceInterval(78, 1555, 1588)
        assert 1555 in band
        assert 1588 in band
        assert 1589 not in band
