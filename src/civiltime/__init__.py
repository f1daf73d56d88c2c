"""civiltime — an immutable civil datetime value type."""

from civiltime.domain.civil import Datetime, parse
from civiltime.domain.clock import Clock, FixedClock, SystemClock
from civiltime.domain.errors import FormatError, NumericFormatError, StructuralFormatError
from civiltime.domain.parts import ArithmeticPolicy, DatetimePart

__all__ = [
    "ArithmeticPolicy",
    "Clock",
    "Datetime",
    "DatetimePart",
    "FixedClock",
    "FormatError",
    "NumericFormatError",
    "StructuralFormatError",
    "SystemClock",
    "parse",
]
