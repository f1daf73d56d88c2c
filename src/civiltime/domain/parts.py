"""Field selectors and arithmetic policies."""

from __future__ import annotations

from enum import StrEnum


class DatetimePart(StrEnum):
    """The field a ``plus``/``minus`` shift applies to."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    NANOSECOND = "nanosecond"

    @classmethod
    def ordered(cls) -> list[DatetimePart]:
        """Members from most to least significant."""
        return list(cls)


class ArithmeticPolicy(StrEnum):
    """How field shifts treat overflow.

    NORMALIZE cascades overflow through the Gregorian calendar.
    RAW adds to the selected field only, so results may hold
    out-of-range values such as ``month=13``.
    """

    NORMALIZE = "normalize"
    RAW = "raw"
