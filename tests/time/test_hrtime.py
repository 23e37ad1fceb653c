# topmark:header:start
#
#   project      : Aconitum
#   file         : test_hrtime.py
#   file_relpath : tests/time/test_hrtime.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for the high resolution timing helpers."""

from __future__ import annotations

import asyncio

import pytest

from aconitum.time.hrtime import HrTime, convert_hrtime, delay, delay_async, precise_now, time_span


def test_convert_hrtime() -> None:
    assert convert_hrtime(1_500_000_000) == HrTime(
        seconds=1.5, milliseconds=1500.0, nanoseconds=1_500_000_000
    )


def test_precise_now_is_monotonic() -> None:
    first = precise_now()
    assert precise_now() >= first >= 0


def test_time_span_measures_a_delay() -> None:
    span = time_span()
    delay(milliseconds=20)
    assert span() >= 20
    assert span.rounded() >= 20
    assert span.seconds() >= 0.02
    assert span.nanoseconds() >= 20_000_000


def test_delay_async() -> None:
    span = time_span()
    asyncio.run(delay_async(seconds=0.01))
    assert span() >= 10


def test_delay_requires_a_duration() -> None:
    with pytest.raises(TypeError):
        delay()
    with pytest.raises(TypeError):
        asyncio.run(delay_async())
