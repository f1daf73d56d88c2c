"""Shared pytest fixtures for civiltime tests."""

from __future__ import annotations

import datetime

import pytest

from civiltime.domain.clock import FixedClock

UTC = datetime.timezone.utc
PLUS_TWO = datetime.timezone(datetime.timedelta(hours=2))


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock stopped at 2023-05-06T07:08:09.123456 local wall time."""
    return FixedClock(datetime.datetime(2023, 5, 6, 7, 8, 9, 123456))


@pytest.fixture
def utc() -> datetime.tzinfo:
    return UTC


@pytest.fixture
def plus_two() -> datetime.tzinfo:
    """Fixed +02:00 zone."""
    return PLUS_TWO
