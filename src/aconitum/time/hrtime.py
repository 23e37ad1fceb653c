# topmark:header:start
#
#   project      : Aconitum
#   file         : hrtime.py
#   file_relpath : src/aconitum/time/hrtime.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""High resolution timing helpers built on ``time.perf_counter_ns``."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

from aconitum.config.logging import get_logger
from aconitum.time.pretty_ms import round_half_up

logger = get_logger(__name__)

_ORIGIN_NS: int = time.perf_counter_ns()


@dataclass(frozen=True)
class HrTime:
    """A nanosecond duration expressed in several units."""

    seconds: float
    milliseconds: float
    nanoseconds: int | float


def convert_hrtime(nanoseconds: int | float) -> HrTime:
    """Convert a nanosecond duration to seconds and milliseconds.

    Examples:
        >>> convert_hrtime(1_500_000_000)
        HrTime(seconds=1.5, milliseconds=1500.0, nanoseconds=1500000000)
    """
    return HrTime(
        seconds=nanoseconds / 1e9,
        milliseconds=nanoseconds / 1e6,
        nanoseconds=nanoseconds,
    )


def precise_now() -> int:
    """Return monotonic nanoseconds elapsed since this module was loaded."""
    return time.perf_counter_ns() - _ORIGIN_NS


class TimeSpan:
    """Stopwatch started on creation. Calling it returns elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def _elapsed(self) -> HrTime:
        return convert_hrtime(time.perf_counter_ns() - self._start)

    def __call__(self) -> float:
        return self._elapsed().milliseconds

    def rounded(self) -> int:
        return round_half_up(self._elapsed().milliseconds)

    def seconds(self) -> float:
        return self._elapsed().seconds

    def nanoseconds(self) -> int | float:
        return self._elapsed().nanoseconds


def time_span() -> TimeSpan:
    """Start a [`TimeSpan`][aconitum.time.hrtime.TimeSpan] stopwatch."""
    return TimeSpan()


def _delay_seconds(seconds: float | None, milliseconds: float | None) -> float:
    if seconds is not None:
        return seconds
    if milliseconds is not None:
        return milliseconds / 1000
    raise TypeError("Expected either `seconds` or `milliseconds`.")


def delay(*, seconds: float | None = None, milliseconds: float | None = None) -> None:
    """Block for the given duration. ``seconds`` wins when both are given.

    Raises:
        TypeError: If neither ``seconds`` nor ``milliseconds`` is given.
    """
    duration = _delay_seconds(seconds, milliseconds)
    logger.trace("sleeping %.3fs", duration)
    time.sleep(duration)


async def delay_async(*, seconds: float | None = None, milliseconds: float | None = None) -> None:
    """Asynchronous counterpart of [`delay`][aconitum.time.hrtime.delay].

    Raises:
        TypeError: If neither ``seconds`` nor ``milliseconds`` is given.
    """
    duration = _delay_seconds(seconds, milliseconds)
    logger.trace("sleeping %.3fs", duration)
    await asyncio.sleep(duration)
