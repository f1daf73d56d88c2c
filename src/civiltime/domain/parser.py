"""Text to field values.

Accepted shapes, tried in this order:

- ``2022-11-20T08:12:13`` and ``2022-11-20T08:12:13Z``
- ``2022-11-20 08:12:13`` and ``2022.11.20 08:12:13``
- ``2022-11-20 08:12`` and ``2022.11.20 08:12``

A trailing ``Z`` is stripped and ignored; it does not mean UTC.
The nanosecond field is always 0.

The whole shape is checked before any component is converted, so a
structurally wrong string always raises :class:`StructuralFormatError`.
"""

from __future__ import annotations

import logging
import re

from civiltime.domain.calendar import Fields
from civiltime.domain.errors import NumericFormatError, StructuralFormatError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_DATE_NAMES = ("year", "month", "day")
_TIME_NAMES = ("hour", "minute", "second")
_DATE_DELIMITERS = ("-", ".")


def _structural(text: str, reason: str) -> StructuralFormatError:
    logger.debug(
        "Rejected datetime text %r: %s", text, reason, extra={"text": text, "reason": reason}
    )
    return StructuralFormatError(text, reason)


def _to_int(text: str, component: str, value: str) -> int:
    if _INTEGER.fullmatch(value) is None:
        error = NumericFormatError(text, component, value)
        logger.debug(
            "Rejected datetime text %r: %s",
            text,
            error.reason,
            extra={"text": text, "reason": error.reason},
        )
        raise error
    return int(value)


def _convert(text: str, date: list[str], time: list[str]) -> Fields:
    values = [_to_int(text, name, raw) for name, raw in zip(_DATE_NAMES, date)]
    values += [_to_int(text, name, raw) for name, raw in zip(_TIME_NAMES, time)]
    # Missing seconds default to zero; the parser never sets nanoseconds.
    values += [0] * (7 - len(values))
    return tuple(values)  # type: ignore[return-value]


def _split_t(text: str, date_part: str, time_part: str) -> Fields:
    date = date_part.split("-")
    if len(date) != 3:
        raise _structural(text, "Date must have 3 components separated by '-'")
    time = time_part.rstrip("Z").split(":")
    if len(time) != 3:
        raise _structural(text, "Time must have 3 components separated by ':'")
    return _convert(text, date, time)


def _split_space(text: str) -> Fields:
    segments = text.split(" ")
    if len(segments) != 2:
        raise _structural(text, "Expected a date and a time separated by one space")
    date_part, time_part = segments

    for delimiter in _DATE_DELIMITERS:
        date = date_part.split(delimiter)
        if len(date) == 3:
            break
    else:
        raise _structural(text, "Illegal delimiter or size in date")

    time = time_part.split(":")
    if len(time) not in (2, 3):
        raise _structural(text, "Illegal delimiter or size in time")
    return _convert(text, date, time)


def parse_fields(text: str) -> Fields:
    """Parse *text* into ``(year, month, day, hour, minute, second, nanosecond)``.

    Raises:
        StructuralFormatError: The text matches none of the accepted shapes.
        NumericFormatError: A component is not an integer.
    """
    segments = text.split("T")
    if len(segments) == 2:
        return _split_t(text, *segments)
    if len(segments) > 2:
        raise _structural(text, "More than one 'T' separator")
    return _split_space(text)
