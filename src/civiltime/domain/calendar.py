"""Proleptic Gregorian calendar arithmetic on plain integers.

Ordinals count days with 01-Jan-0001 as day 1. Every function uses floor
division, so year zero and negative years follow the same 400-year cycle
as positive years.

Wall nanoseconds are nanoseconds since 1970-01-01T00:00:00 *local wall
time*; they carry no zone and are not an epoch instant.
"""

from __future__ import annotations

Fields = tuple[int, int, int, int, int, int, int]

NS_PER_SECOND = 1_000_000_000
NS_PER_MINUTE = 60 * NS_PER_SECOND
NS_PER_HOUR = 60 * NS_PER_MINUTE
NS_PER_DAY = 24 * NS_PER_HOUR

_DAYS_IN_MONTH = [-1, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

_DAYS_BEFORE_MONTH = [-1]
_running = 0
for _dim in _DAYS_IN_MONTH[1:]:
    _DAYS_BEFORE_MONTH.append(_running)
    _running += _dim
del _running, _dim


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_before_year(year: int) -> int:
    """Number of days before January 1st of *year*."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


_DI400Y = days_before_year(401)
_DI100Y = days_before_year(101)
_DI4Y = days_before_year(5)


def days_in_month(year: int, month: int) -> int:
    """Length of *month* (1-12) in *year*."""
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_before_month(year: int, month: int) -> int:
    """Number of days in *year* preceding the first day of *month* (1-12)."""
    return _DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap(year))


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Ordinal of a calendar date.

    Out-of-range months carry into the year (month 13 is January of the
    next year) and out-of-range days simply count past the month end.
    """
    carry, month_index = divmod(month - 1, 12)
    year += carry
    month = month_index + 1
    return days_before_year(year) + days_before_month(year, month) + day


def ordinal_to_ymd(n: int) -> tuple[int, int, int]:
    """Inverse of :func:`ymd_to_ordinal` for normalized dates."""
    # Work from the closest 400-year boundary at or before n.
    n -= 1
    n400, n = divmod(n, _DI400Y)
    year = n400 * 400 + 1

    n100, n = divmod(n, _DI100Y)
    n4, n = divmod(n, _DI4Y)
    n1, n = divmod(n, 365)

    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        # Dec 31 at the end of a 4-year or 400-year cycle.
        return year - 1, 12, 31

    leapyear = n1 == 3 and (n4 != 24 or n100 == 3)
    # Estimate is exact or one too large.
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leapyear)
    if preceding > n:
        month -= 1
        preceding -= _DAYS_IN_MONTH[month] + (month == 2 and leapyear)
    return year, month, n - preceding + 1


EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def fields_to_wall_ns(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
) -> int:
    """Collapse seven (possibly out-of-range) fields into wall nanoseconds."""
    days = ymd_to_ordinal(year, month, day) - EPOCH_ORDINAL
    return (
        days * NS_PER_DAY
        + hour * NS_PER_HOUR
        + minute * NS_PER_MINUTE
        + second * NS_PER_SECOND
        + nanosecond
    )


def wall_ns_to_fields(wall_ns: int) -> Fields:
    """Split wall nanoseconds into seven in-range fields."""
    days, rem = divmod(wall_ns, NS_PER_DAY)
    year, month, day = ordinal_to_ymd(days + EPOCH_ORDINAL)
    hour, rem = divmod(rem, NS_PER_HOUR)
    minute, rem = divmod(rem, NS_PER_MINUTE)
    second, nanosecond = divmod(rem, NS_PER_SECOND)
    return year, month, day, hour, minute, second, nanosecond


def normalize_fields(fields: Fields) -> Fields:
    """Cascade every overflowing field into the next larger one.

    ``(2022, 1, 1, 0, 0, 60, 0)`` becomes ``(2022, 1, 1, 0, 1, 0, 0)``;
    ``(2022, 13, 1, ...)`` becomes January 2023.
    """
    return wall_ns_to_fields(fields_to_wall_ns(*fields))


def shift_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Move a normalized date by *months*, clamping the day to the month end.

    January 31 plus one month is the last day of February.
    """
    total = year * 12 + (month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    return year, month, min(day, days_in_month(year, month))
