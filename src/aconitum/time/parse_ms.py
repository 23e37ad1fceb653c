# topmark:header:start
#
#   project      : Aconitum
#   file         : parse_ms.py
#   file_relpath : src/aconitum/time/parse_ms.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Split a millisecond count into days, hours, minutes and smaller units."""

from __future__ import annotations

import math
from dataclasses import dataclass

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


@dataclass(frozen=True)
class TimeComponents:
    """A duration split into units. Every field has the sign of the input."""

    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    microseconds: int
    nanoseconds: int


def check_milliseconds(milliseconds: object) -> float | int:
    """Validate a millisecond count.

    Args:
        milliseconds (object): The value to validate.

    Returns:
        float | int: ``milliseconds``, unchanged.

    Raises:
        TypeError: If it is not an int or float (``bool`` is rejected).
        ValueError: If it is an infinite or NaN float.
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, (int, float)):
        raise TypeError(f"Expected a finite number, got `{type(milliseconds).__name__}`")
    if isinstance(milliseconds, float) and not math.isfinite(milliseconds):
        raise ValueError(f"Expected a finite number, got {milliseconds}")
    return milliseconds


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // b
    return -q if a < 0 else q


def _tmod(a: int, b: int) -> int:
    return a - b * _tdiv(a, b)


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def parse_ms(milliseconds: float | int) -> TimeComponents:
    """Split ``milliseconds`` into its components.

    Integers are split exactly and have no sub-millisecond part. Floats are
    truncated toward zero at every unit.

    Args:
        milliseconds (float | int): The duration in milliseconds.

    Returns:
        TimeComponents: The components of the duration.

    Raises:
        TypeError: If ``milliseconds`` is not a number.
        ValueError: If ``milliseconds`` is not finite.

    Examples:
        >>> parts = parse_ms(1337000001)
        >>> (parts.days, parts.hours, parts.minutes, parts.seconds, parts.milliseconds)
        (15, 11, 23, 20, 1)
    """
    check_milliseconds(milliseconds)

    if isinstance(milliseconds, int):
        return TimeComponents(
            days=_tdiv(milliseconds, MS_PER_DAY),
            hours=_tmod(_tdiv(milliseconds, MS_PER_HOUR), 24),
            minutes=_tmod(_tdiv(milliseconds, MS_PER_MINUTE), 60),
            seconds=_tmod(_tdiv(milliseconds, MS_PER_SECOND), 60),
            milliseconds=_tmod(milliseconds, 1000),
            microseconds=0,
            nanoseconds=0,
        )

    return TimeComponents(
        days=math.trunc(milliseconds / MS_PER_DAY),
        hours=math.trunc(math.fmod(milliseconds / MS_PER_HOUR, 24)),
        minutes=math.trunc(math.fmod(milliseconds / MS_PER_MINUTE, 60)),
        seconds=math.trunc(math.fmod(milliseconds / MS_PER_SECOND, 60)),
        milliseconds=math.trunc(math.fmod(milliseconds, 1000)),
        microseconds=math.trunc(math.fmod(_finite_or_zero(milliseconds * 1000), 1000)),
        nanoseconds=math.trunc(math.fmod(_finite_or_zero(milliseconds * 1e6), 1000)),
    )
