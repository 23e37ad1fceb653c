# topmark:header:start
#
#   project      : Aconitum
#   file         : in_range.py
#   file_relpath : src/aconitum/misc/in_range.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Inclusive range checks that tolerate reversed bounds."""

from __future__ import annotations

from numbers import Real


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def in_range(number: float, start: float = 0, end: float | None = None) -> bool:
    """Return whether ``number`` lies between ``start`` and ``end``, inclusive.

    With only ``start`` given the range is ``0..start``. Reversed bounds are swapped.

    Raises:
        TypeError: If any argument is not a real number.

    Examples:
        >>> in_range(30, 10, 100)
        True
        >>> in_range(30, 100, 10)
        True
        >>> in_range(30, 10)
        False
    """
    if end is None:
        start, end = 0, start
    if not all(_is_number(v) for v in (number, start, end)):
        raise TypeError("Expected each argument to be a number")
    return min(start, end) <= number <= max(start, end)
