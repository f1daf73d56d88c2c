"""Tests for proleptic Gregorian arithmetic."""

import datetime

import pytest

from civiltime.domain.calendar import (
    EPOCH_ORDINAL,
    NS_PER_SECOND,
    days_in_month,
    fields_to_wall_ns,
    is_leap,
    normalize_fields,
    ordinal_to_ymd,
    shift_months,
    wall_ns_to_fields,
    ymd_to_ordinal,
)


class TestLeapYears:
    @pytest.mark.parametrize("year", [2000, 2024, 1600, 0, -4, -400])
    def test_leap(self, year: int) -> None:
        assert is_leap(year)

    @pytest.mark.parametrize("year", [1900, 2023, 2100, -1, -100])
    def test_common(self, year: int) -> None:
        assert not is_leap(year)

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestOrdinals:
    def test_first_day(self) -> None:
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_epoch(self) -> None:
        assert EPOCH_ORDINAL == datetime.date(1970, 1, 1).toordinal()

    @pytest.mark.parametrize(
        "ymd",
        [(1, 12, 31), (1600, 2, 29), (1999, 12, 31), (2000, 3, 1), (2022, 11, 20), (9999, 12, 31)],
    )
    def test_matches_stdlib(self, ymd: tuple[int, int, int]) -> None:
        ordinal = datetime.date(*ymd).toordinal()
        assert ymd_to_ordinal(*ymd) == ordinal
        assert ordinal_to_ymd(ordinal) == ymd

    def test_inverse_across_year_zero(self) -> None:
        for n in range(-800, 800, 7):
            assert ymd_to_ordinal(*ordinal_to_ymd(n)) == n

    def test_year_zero_is_leap(self) -> None:
        assert ordinal_to_ymd(ymd_to_ordinal(0, 2, 29)) == (0, 2, 29)
        assert ordinal_to_ymd(0) == (0, 12, 31)

    def test_month_overflow_carries(self) -> None:
        assert ymd_to_ordinal(2022, 13, 1) == ymd_to_ordinal(2023, 1, 1)
        assert ymd_to_ordinal(2022, 0, 1) == ymd_to_ordinal(2021, 12, 1)

    def test_day_overflow_counts_past_month_end(self) -> None:
        assert ymd_to_ordinal(2022, 1, 41) == ymd_to_ordinal(2022, 2, 10)


class TestWallNanoseconds:
    def test_epoch_is_zero(self) -> None:
        assert fields_to_wall_ns(1970, 1, 1, 0, 0, 0, 0) == 0
        assert wall_ns_to_fields(0) == (1970, 1, 1, 0, 0, 0, 0)

    def test_before_epoch(self) -> None:
        assert wall_ns_to_fields(-1) == (1969, 12, 31, 23, 59, 59, 999_999_999)

    def test_one_day(self) -> None:
        assert fields_to_wall_ns(1970, 1, 2, 0, 0, 0, 0) == 86_400 * NS_PER_SECOND


class TestNormalizeFields:
    def test_sixty_seconds_roll_into_minute(self) -> None:
        assert normalize_fields((2022, 1, 1, 0, 0, 60, 0)) == (2022, 1, 1, 0, 1, 0, 0)

    def test_cascade_into_new_year(self) -> None:
        fields = (2022, 12, 31, 23, 59, 59, 1_000_000_000)
        assert normalize_fields(fields) == (2023, 1, 1, 0, 0, 0, 0)

    def test_day_zero_is_previous_month_end(self) -> None:
        assert normalize_fields((2022, 3, 0, 0, 0, 0, 0)) == (2022, 2, 28, 0, 0, 0, 0)

    def test_negative_hour(self) -> None:
        assert normalize_fields((2022, 1, 1, -1, 0, 0, 0)) == (2021, 12, 31, 23, 0, 0, 0)

    def test_in_range_unchanged(self) -> None:
        fields = (2022, 11, 20, 8, 12, 13, 5)
        assert normalize_fields(fields) == fields


class TestShiftMonths:
    @pytest.mark.parametrize(
        "start,months,expected",
        [
            ((2022, 1, 31), 1, (2022, 2, 28)),
            ((2024, 1, 31), 1, (2024, 2, 29)),
            ((2022, 3, 31), -1, (2022, 2, 28)),
            ((2022, 11, 15), 3, (2023, 2, 15)),
            ((2022, 1, 15), -13, (2020, 12, 15)),
            ((2022, 5, 31), 1, (2022, 6, 30)),
        ],
    )
    def test_shift(
        self,
        start: tuple[int, int, int],
        months: int,
        expected: tuple[int, int, int],
    ) -> None:
        assert shift_months(*start, months) == expected
