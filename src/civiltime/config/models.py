"""Pydantic configuration models with code-baked defaults.

Sparse contract: every field has a default, callers override only what
they need via ``CalendarConfig.model_validate({...})``.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

from civiltime.domain.parts import ArithmeticPolicy


class CalendarConfig(BaseModel):
    """Behaviour of a :class:`~civiltime.services.calendar.CalendarService`.

    Attributes:
        arithmetic: Overflow policy for shifts.
        include_nanosecond: Whether equality checks compare nanoseconds.
        utc_offset_minutes: Fixed zone offset for instant conversions, or
            None to use the host's local zone.
    """

    model_config = {"frozen": True}

    arithmetic: ArithmeticPolicy = ArithmeticPolicy.NORMALIZE
    include_nanosecond: bool = True
    utc_offset_minutes: int | None = Field(default=None, ge=-1439, le=1439)

    def zone(self) -> datetime.tzinfo | None:
        """The configured fixed-offset zone, or None for the host zone."""
        if self.utc_offset_minutes is None:
            return None
        return datetime.timezone(datetime.timedelta(minutes=self.utc_offset_minutes))
