# topmark:header:start
#
#   project      : Aconitum
#   file         : millies.py
#   file_relpath : src/aconitum/time/millies.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Convert between duration strings (``"2 days"``, ``"1.5h"``) and milliseconds.

Examples:
    >>> ms("2 days")
    172800000.0
    >>> ms(60000)
    '1m'
    >>> ms(2 * 60000, long=True)
    '2 minutes'
"""

from __future__ import annotations

import json
import math
import re
from typing import Final

from aconitum.time.pretty_ms import round_half_up

SECOND: Final[float] = 1000
MINUTE: Final[float] = SECOND * 60
HOUR: Final[float] = MINUTE * 60
DAY: Final[float] = HOUR * 24
WEEK: Final[float] = DAY * 7
YEAR: Final[float] = DAY * 365.25

MAX_INPUT_LENGTH: Final[int] = 100

_DURATION_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<value>-?(?:\d+)?\.?\d+) *"
    r"(?P<type>milliseconds?|msecs?|ms|seconds?|secs?|s|minutes?|mins?|m|hours?|hrs?|h"
    r"|days?|d|weeks?|w|years?|yrs?|y)?$",
    re.IGNORECASE,
)

_UNIT_MS: Final[dict[str, float]] = {
    **dict.fromkeys(("years", "year", "yrs", "yr", "y"), YEAR),
    **dict.fromkeys(("weeks", "week", "w"), WEEK),
    **dict.fromkeys(("days", "day", "d"), DAY),
    **dict.fromkeys(("hours", "hour", "hrs", "hr", "h"), HOUR),
    **dict.fromkeys(("minutes", "minute", "mins", "min", "m"), MINUTE),
    **dict.fromkeys(("seconds", "second", "secs", "sec", "s"), SECOND),
    **dict.fromkeys(("milliseconds", "millisecond", "msecs", "msec", "ms"), 1),
}

# Largest first, as (size, short suffix, long name)
_SCALES: Final[tuple[tuple[float, str, str], ...]] = (
    (DAY, "d", "day"),
    (HOUR, "h", "hour"),
    (MINUTE, "m", "minute"),
    (SECOND, "s", "second"),
)


class DurationError(ValueError):
    """A duration could not be parsed or formatted.

    Attributes:
        value (object): The offending value.
    """

    def __init__(self, message: str, value: object) -> None:
        super().__init__(f"{message}. value={json.dumps(value, default=repr)}")
        self.value = value


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def parse(text: str) -> float:
    """Parse a duration string into milliseconds.

    Args:
        text (str): A number with an optional unit, e.g. ``"1.5h"`` or ``"2 days"``.
            A bare number is read as milliseconds.

    Returns:
        float: The duration in milliseconds, or ``nan`` if ``text`` is not a duration.

    Raises:
        DurationError: If ``text`` is not a string of 1 to 100 characters.
    """
    if not isinstance(text, str) or not 0 < len(text) <= MAX_INPUT_LENGTH:
        raise DurationError(
            "Value provided to millies.parse() must be a string with length between 1 and "
            f"{MAX_INPUT_LENGTH}",
            text,
        )

    m = _DURATION_RE.match(text)
    if m is None:
        return math.nan
    return float(m.group("value")) * _UNIT_MS[(m.group("type") or "ms").lower()]


def format(milliseconds: float, long: bool = False) -> str:  # noqa: A001
    """Format milliseconds as the largest whole unit.

    Args:
        milliseconds (float): The duration.
        long (bool): Use ``2 minutes`` instead of ``2m``. The unit is plural from
            1.5 units on.

    Returns:
        str: The formatted duration.

    Raises:
        DurationError: If ``milliseconds`` is not a finite number.
    """
    if (
        isinstance(milliseconds, bool)
        or not isinstance(milliseconds, (int, float))
        or not math.isfinite(milliseconds)
    ):
        raise DurationError(
            "Value provided to millies.format() must be of type number", milliseconds
        )

    ms_abs = abs(milliseconds)
    for size, short, name in _SCALES:
        if ms_abs >= size:
            count = round_half_up(milliseconds / size)
            if not long:
                return f"{count}{short}"
            return f"{count} {name}{'s' if ms_abs >= size * 1.5 else ''}"

    return f"{_number(milliseconds)} ms" if long else f"{_number(milliseconds)}ms"


def ms(value: str | float, long: bool = False) -> float | str:
    """Parse a duration string, or format a number of milliseconds.

    Raises:
        DurationError: If ``value`` is neither a string nor a number, or is invalid.
    """
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format(value, long=long)
    raise DurationError("Value provided to millies() must be a string or number", value)
