# topmark:header:start
#
#   project      : Aconitum
#   file         : pretty_ms.py
#   file_relpath : src/aconitum/time/pretty_ms.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Render millisecond durations for humans: ``1337000`` becomes ``22m 17s``.

Years are counted as 365 days. Negative durations get a leading ``-``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from aconitum.time.parse_ms import MS_PER_DAY, check_milliseconds, parse_ms

SECOND_ROUNDING_EPSILON: Final[float] = 0.000_000_1

_TRAILING_ZERO_DECIMALS_RE: Final[re.Pattern[str]] = re.compile(r"\.0+$")


@dataclass(frozen=True)
class PrettyMsOptions:
    """Options for [`pretty_ms`][aconitum.time.pretty_ms.pretty_ms].

    Attributes:
        seconds_decimal_digits (int): Decimals shown for seconds.
        milliseconds_decimal_digits (int): Decimals shown for milliseconds.
        keep_decimals_on_whole_seconds (bool): Show ``1.0s`` instead of ``1s``.
        compact (bool): Only show the largest unit, without decimals.
        unit_count (int | None): Show at most this many units.
        verbose (bool): Use full unit names (``5 hours``).
        separate_milliseconds (bool): Show milliseconds apart from seconds.
        format_sub_milliseconds (bool): Show microseconds and nanoseconds.
        colon_notation (bool): Digital watch style (``5:01``). Turns off
            ``compact``, ``verbose``, ``separate_milliseconds`` and
            ``format_sub_milliseconds``.
        hide_year (bool): Fold years into days.
        hide_year_and_days (bool): Fold years and days into hours.
        hide_seconds (bool): Drop seconds and smaller units.
    """

    seconds_decimal_digits: int = 1
    milliseconds_decimal_digits: int = 0
    keep_decimals_on_whole_seconds: bool = False
    compact: bool = False
    unit_count: int | None = None
    verbose: bool = False
    separate_milliseconds: bool = False
    format_sub_milliseconds: bool = False
    colon_notation: bool = False
    hide_year: bool = False
    hide_year_and_days: bool = False
    hide_seconds: bool = False

    def resolved(self) -> PrettyMsOptions:
        """Return the options with the overrides implied by colon/compact notation."""
        opts = self
        if opts.colon_notation:
            opts = replace(
                opts,
                compact=False,
                format_sub_milliseconds=False,
                separate_milliseconds=False,
                verbose=False,
            )
        if opts.compact:
            opts = replace(
                opts,
                unit_count=1,
                seconds_decimal_digits=0,
                milliseconds_decimal_digits=0,
            )
        return opts


def to_fixed(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` decimals, rounding exact ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def _floor_decimals(value: float, digits: int) -> str:
    scale = 10**digits
    return f"{math.floor(value * scale + SECOND_ROUNDING_EPSILON) / scale:.{digits}f}"


def _pluralize(word: str, count: float) -> str:
    return word if count == 1 else f"{word}s"


def pretty_ms(
    milliseconds: float | int,
    options: PrettyMsOptions | Mapping[str, object] | None = None,
    **kwargs: object,
) -> str:
    """Format a duration in milliseconds.

    Args:
        milliseconds (float | int): The duration.
        options (PrettyMsOptions | Mapping[str, object] | None): Formatting options.
        **kwargs (object): Individual options, applied over ``options``.

    Returns:
        str: The formatted duration.

    Raises:
        TypeError: If ``milliseconds`` is not a number or an option is unknown.
        ValueError: If ``milliseconds`` is not finite.

    Examples:
        >>> pretty_ms(1337000)
        '22m 17s'
        >>> pretty_ms(1337, verbose=True)
        '1.3 seconds'
        >>> pretty_ms(1335669000, compact=True)
        '15d'
        >>> pretty_ms(1337, colon_notation=True)
        '0:01.3'
    """
    check_milliseconds(milliseconds)

    if options is None:
        opts = PrettyMsOptions()
    elif isinstance(options, PrettyMsOptions):
        opts = options
    else:
        opts = PrettyMsOptions(**options)  # type: ignore[arg-type]
    if kwargs:
        opts = replace(opts, **kwargs)  # type: ignore[arg-type]
    opts = opts.resolved()

    sign = "-" if milliseconds < 0 else ""
    milliseconds = -milliseconds if milliseconds < 0 else milliseconds

    result: list[str] = []

    def add(value: float, long: str, short: str, value_string: str | None = None) -> None:
        if (not result or not opts.colon_notation) and value == 0:
            if not (opts.colon_notation and short == "m"):
                return

        text = str(value) if value_string is None else value_string
        if opts.colon_notation:
            whole_digits = len(text.split(".", 1)[0])
            min_length = 2 if result else 1
            text = "0" * max(0, min_length - whole_digits) + text
        else:
            text += f" {_pluralize(long, value)}" if opts.verbose else short
        result.append(text)

    parsed = parse_ms(milliseconds)
    days = parsed.days

    if opts.hide_year_and_days:
        add(days * 24 + parsed.hours, "hour", "h")
    else:
        if opts.hide_year:
            add(days, "day", "d")
        else:
            add(days // 365, "year", "y")
            add(days % 365, "day", "d")
        add(parsed.hours, "hour", "h")

    add(parsed.minutes, "minute", "m")

    if not opts.hide_seconds:
        if (
            opts.separate_milliseconds
            or opts.format_sub_milliseconds
            or (not opts.colon_notation and milliseconds < 1000)
        ):
            add(parsed.seconds, "second", "s")
            if opts.format_sub_milliseconds:
                add(parsed.milliseconds, "millisecond", "ms")
                add(parsed.microseconds, "microsecond", "µs")
                add(parsed.nanoseconds, "nanosecond", "ns")
            else:
                below = parsed.milliseconds + parsed.microseconds / 1000 + parsed.nanoseconds / 1e6
                digits = opts.milliseconds_decimal_digits
                if digits:
                    ms_string = to_fixed(below, digits)
                else:
                    ms_string = str(round_half_up(below) if below >= 1 else math.ceil(below))
                add(float(ms_string), "millisecond", "ms", ms_string)
        else:
            if isinstance(milliseconds, int):
                seconds = (milliseconds % MS_PER_DAY) / 1000 % 60
            else:
                seconds = milliseconds / 1000 % 60
            seconds_fixed = _floor_decimals(seconds, opts.seconds_decimal_digits)
            seconds_string = (
                seconds_fixed
                if opts.keep_decimals_on_whole_seconds
                else _TRAILING_ZERO_DECIMALS_RE.sub("", seconds_fixed)
            )
            add(float(seconds_string), "second", "s", seconds_string)

    if not result:
        return f"{sign}0{' milliseconds' if opts.verbose else 'ms'}"

    if opts.unit_count is not None:
        del result[opts.unit_count :]

    return sign + (":" if opts.colon_notation else " ").join(result)
