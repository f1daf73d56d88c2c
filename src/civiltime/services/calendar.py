"""CalendarService — Datetime operations bound to one configuration.

The value type takes its policy, zone and clock per call. This service
fixes all three once, so application code states the arithmetic policy
and zone in a single :class:`CalendarConfig` instead of at every call site.
"""

from __future__ import annotations

import datetime
import logging

from civiltime.config.models import CalendarConfig
from civiltime.domain.civil import Datetime
from civiltime.domain.clock import Clock, SystemClock
from civiltime.domain.parts import DatetimePart

logger = logging.getLogger(__name__)


class CalendarService:
    """Configured entry point for creating, shifting and converting Datetimes.

    Usage::

        calendar = CalendarService(CalendarConfig(arithmetic="raw"))
        later = calendar.shift(calendar.parse("2022-01-31 10:00"), 1, DatetimePart.MONTH)
    """

    def __init__(self, config: CalendarConfig | None = None, clock: Clock | None = None) -> None:
        self._config = config or CalendarConfig()
        self._clock = clock or SystemClock()

    @property
    def config(self) -> CalendarConfig:
        return self._config

    # --- Creation ---

    def now(self) -> Datetime:
        return Datetime.now(self._clock)

    def today(self) -> Datetime:
        """Midnight at the start of the clock's current date."""
        return Datetime.of_time(0, 0, clock=self._clock)

    def at_time(self, hour: int, minute: int, second: int = 0, nanosecond: int = 0) -> Datetime:
        return Datetime.of_time(hour, minute, second, nanosecond, clock=self._clock)

    def parse(self, text: str) -> Datetime:
        return Datetime.parse(text)

    # --- Arithmetic and comparison ---

    def shift(self, value: Datetime, n: int, part: DatetimePart) -> Datetime:
        """``value.plus(n, part)`` under the configured policy."""
        result = value.plus(n, part, self._config.arithmetic)
        logger.debug(
            "Shifted %s by %d %s (%s) -> %s",
            value,
            n,
            part,
            self._config.arithmetic,
            result,
            extra={
                "value": str(value),
                "amount": n,
                "part": str(part),
                "policy": str(self._config.arithmetic),
                "result": str(result),
            },
        )
        return result

    def unshift(self, value: Datetime, n: int, part: DatetimePart) -> Datetime:
        """``value.minus(n, part)`` under the configured policy."""
        return self.shift(value, -n, part)

    def same(self, a: Datetime, b: Datetime) -> bool:
        """Equality under the configured nanosecond mode."""
        return a.equals(b, include_nanosecond=self._config.include_nanosecond)

    # --- Conversions in the configured zone ---

    def from_timestamp(self, timestamp: int) -> Datetime:
        return Datetime.from_timestamp(timestamp, self._config.zone())

    def to_timestamp(self, value: Datetime) -> int:
        return value.to_timestamp(self._config.zone())

    def from_instant(self, instant: datetime.datetime) -> Datetime:
        return Datetime.from_instant(instant, self._config.zone())

    def to_instant(self, value: Datetime) -> datetime.datetime:
        return value.to_instant(self._config.zone())
