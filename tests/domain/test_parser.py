"""Tests for the text parser."""

from __future__ import annotations

import logging

import pytest

from civiltime.domain.errors import FormatError, NumericFormatError, StructuralFormatError
from civiltime.domain.parser import parse_fields


class TestAcceptedShapes:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2022-11-20T08:12:13Z", (2022, 11, 20, 8, 12, 13, 0)),
            ("2022-11-20T08:12:13", (2022, 11, 20, 8, 12, 13, 0)),
            ("2022-11-20 08:12:13", (2022, 11, 20, 8, 12, 13, 0)),
            ("2022.11.20 08:12:13", (2022, 11, 20, 8, 12, 13, 0)),
            ("2022-11-20 08:12", (2022, 11, 20, 8, 12, 0, 0)),
            ("2022.11.20 08:12", (2022, 11, 20, 8, 12, 0, 0)),
        ],
    )
    def test_documented_forms(self, text: str, expected: tuple[int, ...]) -> None:
        assert parse_fields(text) == expected

    def test_all_trailing_z_stripped(self) -> None:
        assert parse_fields("2022-11-20T08:12:13ZZ") == (2022, 11, 20, 8, 12, 13, 0)

    def test_unpadded_components(self) -> None:
        assert parse_fields("2022-3-4T8:5:9") == (2022, 3, 4, 8, 5, 9, 0)

    def test_values_not_range_checked(self) -> None:
        assert parse_fields("2022-13-40 25:61") == (2022, 13, 40, 25, 61, 0, 0)


class TestStructuralErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "not-a-date",
            "",
            "2022-11-20",
            "2022-11T08:12:13",
            "2022-11-20T08:12",
            "2022-11-20T08:12:13:14",
            "2022-11-20T08:12T13",
            "2022/11/20 08:12",
            "2022-11.20 08:12",
            "2022-11-20 08",
            "2022-11-20 08:12:13:14",
            "2022-11-20  08:12",
        ],
    )
    def test_rejected(self, text: str) -> None:
        with pytest.raises(StructuralFormatError) as excinfo:
            parse_fields(text)
        assert excinfo.value.text == text

    def test_is_a_format_error(self) -> None:
        with pytest.raises(FormatError):
            parse_fields("not-a-date")

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_fields("not-a-date")

    def test_structure_checked_before_numbers(self) -> None:
        """A wrong shape wins over a bad number."""
        with pytest.raises(StructuralFormatError):
            parse_fields("2022-xx-20T08:12")


class TestNumericErrors:
    def test_bad_minute(self) -> None:
        with pytest.raises(NumericFormatError) as excinfo:
            parse_fields("2022-11-20T08:1a:13")
        assert excinfo.value.component == "minute"
        assert excinfo.value.value == "1a"

    @pytest.mark.parametrize(
        "text,component",
        [
            ("2022-11-xxT08:12:13", "day"),
            ("yyyy.11.20 08:12", "year"),
            ("2022-11-20 08: 12", "minute"),
            ("2022-11-20T08:12:", "second"),
            ("2022-11-20 08:12:13Z", "second"),
            ("2022-11-20T08:12:1.5", "second"),
        ],
    )
    def test_component_reported(self, text: str, component: str) -> None:
        with pytest.raises(NumericFormatError) as excinfo:
            parse_fields(text)
        assert excinfo.value.component == component

    def test_not_structural(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            parse_fields("2022-11-20T08:1a:13")
        assert not isinstance(excinfo.value, StructuralFormatError)


class TestLogging:
    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="civiltime"):
            with pytest.raises(StructuralFormatError):
                parse_fields("not-a-date")
        assert "Rejected datetime text" in caplog.text
