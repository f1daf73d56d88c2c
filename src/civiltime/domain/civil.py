"""The Datetime value type.

A Datetime is seven plain integers: year, month, day, hour, minute,
second and nanosecond. Construction never validates or clamps them.
Instances are frozen; ``plus`` and ``minus`` return new instances.

Ordering is lexicographic over the seven fields, so exactly one of
``is_before``, ``equals`` and ``is_after`` holds for any pair.

Conversions to and from absolute instants need a zone. Every such method
takes ``tz``; ``None`` means the host's local zone, so the same fields can
map to different instants on differently configured hosts.

``str()`` output parses back to the same first six fields for years >= 0.
Nanoseconds are dropped, and negative years do not parse at all.
"""

from __future__ import annotations

import datetime
from typing import Any, Self

from pydantic import BaseModel, model_validator

from civiltime.domain.calendar import (
    NS_PER_DAY,
    NS_PER_HOUR,
    NS_PER_MINUTE,
    NS_PER_SECOND,
    Fields,
    fields_to_wall_ns,
    is_leap,
    normalize_fields,
    shift_months,
    wall_ns_to_fields,
)
from civiltime.domain.clock import Clock, SystemClock
from civiltime.domain.parser import parse_fields
from civiltime.domain.parts import ArithmeticPolicy, DatetimePart

FIELD_NAMES = tuple(str(part) for part in DatetimePart.ordered())

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_NS_PER_MS = 1_000_000
_ONE_MICROSECOND = datetime.timedelta(microseconds=1)

# Instants the stdlib can place in any zone; offsets outside are borrowed from the edges.
_MIN_ZONED_SECONDS = int(
    (datetime.datetime(datetime.MINYEAR + 1, 1, 1, tzinfo=datetime.timezone.utc) - _EPOCH)
    .total_seconds()
)
_MAX_ZONED_SECONDS = int(
    (datetime.datetime(datetime.MAXYEAR - 1, 12, 31, tzinfo=datetime.timezone.utc) - _EPOCH)
    .total_seconds()
)

# Instants a UTC stdlib datetime can hold, in epoch microseconds.
_UTC_MIN = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
_UTC_MAX = datetime.datetime.max.replace(tzinfo=datetime.timezone.utc)
_MIN_INSTANT_US = (_UTC_MIN - _EPOCH) // _ONE_MICROSECOND
_MAX_INSTANT_US = (_UTC_MAX - _EPOCH) // _ONE_MICROSECOND


def _utc_offset_ns(fields: Fields, tz: datetime.tzinfo | None) -> int:
    """Offset of *tz* at the wall time *fields* (normalized), in nanoseconds.

    Years outside what the stdlib can represent borrow the offset rules of
    the nearest representable year.
    """
    year, month, day, hour, minute, second, _ = fields
    year = min(max(year, datetime.MINYEAR + 1), datetime.MAXYEAR - 1)
    if month == 2 and day == 29 and not is_leap(year):
        day = 28
    wall = datetime.datetime(year, month, day, hour, minute, second)
    if tz is None:
        offset = wall.astimezone().utcoffset()
    else:
        offset = wall.replace(tzinfo=tz).utcoffset()
    if offset is None:
        return 0
    return (offset // _ONE_MICROSECOND) * 1000


def _epoch_ns_of(instant: datetime.datetime) -> int:
    delta = instant - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * NS_PER_SECOND + delta.microseconds * 1000


class Datetime(BaseModel):
    """An immutable civil date and time.

    Build with keywords or one of the constructors::

        Datetime.of(2022, 11, 20, 8, 12, 13)
        Datetime.of_date(2022, 11, 20)
        Datetime.parse("2022-11-20T08:12:13")

    Attributes map 1:1 to the seven fields. Values outside their nominal
    ranges are kept as given; :meth:`normalized` cascades them.
    """

    model_config = {"frozen": True, "strict": True}

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    @model_validator(mode="before")
    @classmethod
    def coerce_text(cls, data: Any) -> Any:
        """Let ``model_validate`` accept the textual forms."""
        if isinstance(data, str):
            return dict(zip(FIELD_NAMES, parse_fields(data)))
        return data

    # --- Constructors ---

    @classmethod
    def _from_fields(cls, fields: Fields) -> Self:
        return cls(**dict(zip(FIELD_NAMES, fields)))

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> Self:
        """Positional constructor; time fields default to zero."""
        return cls._from_fields((year, month, day, hour, minute, second, nanosecond))

    @classmethod
    def of_date(cls, year: int, month: int, day: int) -> Self:
        """Midnight at the start of the given date."""
        return cls.of(year, month, day)

    @classmethod
    def of_time(
        cls,
        hour: int,
        minute: int,
        second: int = 0,
        nanosecond: int = 0,
        *,
        clock: Clock | None = None,
    ) -> Self:
        """The given time of day on *clock*'s current date."""
        today = (clock or SystemClock()).now()
        return cls.of(today.year, today.month, today.day, hour, minute, second, nanosecond)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Self:
        return cls.from_datetime((clock or SystemClock()).now())

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse one of the accepted textual forms.

        Raises:
            StructuralFormatError: Wrong separators or segment counts.
            NumericFormatError: A component is not an integer.
        """
        return cls._from_fields(parse_fields(text))

    @classmethod
    def from_datetime(cls, value: datetime.datetime, tz: datetime.tzinfo | None = None) -> Self:
        """Convert a stdlib datetime.

        A naive value is taken as wall time field by field. An aware value
        is an instant and is converted to *tz* (host zone when None).
        """
        if value.tzinfo is None:
            return cls.of(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond * 1000,
            )
        return cls.from_instant(value, tz)

    @classmethod
    def from_instant(cls, instant: datetime.datetime, tz: datetime.tzinfo | None = None) -> Self:
        """Wall time of *instant* in *tz*.

        A naive *instant* is read as host local time, as the stdlib does.
        """
        if instant.tzinfo is None:
            instant = instant.astimezone()
        return cls.from_epoch_ns(_epoch_ns_of(instant), tz)

    @classmethod
    def from_timestamp(cls, timestamp: int, tz: datetime.tzinfo | None = None) -> Self:
        """Wall time of epoch milliseconds *timestamp* in *tz*."""
        return cls.from_epoch_ns(timestamp * _NS_PER_MS, tz)

    @classmethod
    def from_epoch_ns(cls, epoch_ns: int, tz: datetime.tzinfo | None = None) -> Self:
        """Wall time of epoch nanoseconds *epoch_ns* in *tz*."""
        seconds = min(max(epoch_ns // NS_PER_SECOND, _MIN_ZONED_SECONDS), _MAX_ZONED_SECONDS)
        utc = datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc)
        offset = utc.astimezone(tz).utcoffset()
        offset_ns = 0 if offset is None else (offset // _ONE_MICROSECOND) * 1000
        return cls._from_fields(wall_ns_to_fields(epoch_ns + offset_ns))

    # --- Field access ---

    def as_tuple(self) -> Fields:
        """``(year, month, day, hour, minute, second, nanosecond)``."""
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
        )

    def normalized(self) -> Self:
        """Copy with every overflowing field cascaded into the next larger one."""
        return self._from_fields(normalize_fields(self.as_tuple()))

    # --- Arithmetic ---

    def plus(
        self,
        n: int,
        part: DatetimePart,
        policy: ArithmeticPolicy = ArithmeticPolicy.NORMALIZE,
    ) -> Self:
        """Copy shifted forward by *n* units of *part*.

        Under NORMALIZE the receiver is normalized first and the result is
        a valid calendar date; YEAR and MONTH shifts clamp the day to the
        target month's length. Under RAW only the selected field changes.
        """
        if policy == ArithmeticPolicy.RAW:
            return self._shift_raw(n, part)
        return self._shift_normalized(n, part)

    def minus(
        self,
        n: int,
        part: DatetimePart,
        policy: ArithmeticPolicy = ArithmeticPolicy.NORMALIZE,
    ) -> Self:
        """Copy shifted back by *n* units of *part*."""
        return self.plus(-n, part, policy)

    def _shift_raw(self, n: int, part: DatetimePart) -> Self:
        if part == DatetimePart.YEAR:
            update = {"year": self.year + n}
        elif part == DatetimePart.MONTH:
            update = {"month": self.month + n}
        elif part == DatetimePart.DAY:
            update = {"day": self.day + n}
        elif part == DatetimePart.HOUR:
            update = {"hour": self.hour + n}
        elif part == DatetimePart.MINUTE:
            update = {"minute": self.minute + n}
        elif part == DatetimePart.SECOND:
            update = {"second": self.second + n}
        elif part == DatetimePart.NANOSECOND:
            update = {"nanosecond": self.nanosecond + n}
        else:
            raise ValueError(f"Unknown datetime part: {part!r}")
        return self.model_copy(update=update)

    def _shift_normalized(self, n: int, part: DatetimePart) -> Self:
        fields = normalize_fields(self.as_tuple())
        year, month, day, hour, minute, second, nanosecond = fields

        if part == DatetimePart.YEAR:
            year, month, day = shift_months(year, month, day, 12 * n)
            return self.of(year, month, day, hour, minute, second, nanosecond)
        if part == DatetimePart.MONTH:
            year, month, day = shift_months(year, month, day, n)
            return self.of(year, month, day, hour, minute, second, nanosecond)

        if part == DatetimePart.DAY:
            step = NS_PER_DAY
        elif part == DatetimePart.HOUR:
            step = NS_PER_HOUR
        elif part == DatetimePart.MINUTE:
            step = NS_PER_MINUTE
        elif part == DatetimePart.SECOND:
            step = NS_PER_SECOND
        elif part == DatetimePart.NANOSECOND:
            step = 1
        else:
            raise ValueError(f"Unknown datetime part: {part!r}")
        return self._from_fields(wall_ns_to_fields(fields_to_wall_ns(*fields) + n * step))

    # --- Ordering and equality ---

    def compare_to(self, other: Datetime) -> int:
        """-1, 0 or 1, deciding on the first field that differs."""
        for mine, theirs in zip(self.as_tuple(), other.as_tuple()):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def is_after(self, other: Datetime) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: Datetime) -> bool:
        return self.compare_to(other) < 0

    def equals(self, other: Datetime, include_nanosecond: bool = True) -> bool:
        """Field equality; with ``include_nanosecond=False`` only the first six count."""
        if include_nanosecond:
            return self.as_tuple() == other.as_tuple()
        return self.as_tuple()[:6] == other.as_tuple()[:6]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self.compare_to(other) >= 0

    # --- Conversions ---

    def to_datetime(self) -> datetime.datetime:
        """Naive stdlib datetime of the normalized fields.

        Nanoseconds are truncated to microseconds. Raises ``ValueError``
        outside the stdlib's year range.
        """
        year, month, day, hour, minute, second, nanosecond = normalize_fields(self.as_tuple())
        return datetime.datetime(year, month, day, hour, minute, second, nanosecond // 1000)

    def to_epoch_ns(self, tz: datetime.tzinfo | None = None) -> int:
        """Epoch nanoseconds of this wall time read in *tz* (host zone when None)."""
        fields = normalize_fields(self.as_tuple())
        return fields_to_wall_ns(*fields) - _utc_offset_ns(fields, tz)

    def to_instant(self, tz: datetime.tzinfo | None = None) -> datetime.datetime:
        """Aware UTC datetime; nanoseconds are truncated to microseconds.

        Only instants from 0001-01-01T00:00:00Z to 9999-12-31T23:59:59.999999Z
        fit a stdlib datetime. Use :meth:`to_epoch_ns` for anything else.

        Raises:
            ValueError: The instant falls outside that range.
        """
        micros = self.to_epoch_ns(tz) // 1000
        if not _MIN_INSTANT_US <= micros <= _MAX_INSTANT_US:
            raise ValueError(
                f"{self} is outside the stdlib instant range "
                f"{_UTC_MIN.isoformat()} .. {_UTC_MAX.isoformat()}"
            )
        return _EPOCH + datetime.timedelta(microseconds=micros)

    def to_timestamp(self, tz: datetime.tzinfo | None = None) -> int:
        """Epoch milliseconds."""
        return self.to_epoch_ns(tz) // _NS_PER_MS

    # --- Rendering ---

    def __str__(self) -> str:
        """``YYYY-MM-DDTHH:MM:SS``, zero-padded, nanoseconds omitted.

        Negative years render with a sign (``-0044-03-15T00:00:00``), which
        :meth:`parse` rejects, so only non-negative years round-trip.
        """
        sign = "-" if self.year < 0 else ""
        return (
            f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


def parse(text: str) -> Datetime:
    """Module-level shorthand for :meth:`Datetime.parse`."""
    return Datetime.parse(text)
