"""Sources of "now".

Constructors that fill missing fields from the current date take a
:class:`Clock` so tests can pin the date with :class:`FixedClock`.
The clock is read once per call and never retained.
"""

from __future__ import annotations

import datetime
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current local wall time."""

    def now(self) -> datetime.datetime:
        """Return the current time as a naive local datetime."""
        ...


class SystemClock:
    """The host's local clock."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now()


class FixedClock:
    """A clock stopped at *value*."""

    def __init__(self, value: datetime.datetime) -> None:
        self._value = value

    def now(self) -> datetime.datetime:
        return self._value
