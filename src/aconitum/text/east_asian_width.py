# topmark:header:start
#
#   project      : Aconitum
#   file         : east_asian_width.py
#   file_relpath : src/aconitum/text/east_asian_width.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""East Asian Width lookups for single code points.

Classification comes from the Unicode database shipped with the interpreter
(``unicodedata.east_asian_width``), mapped onto the `EastAsianWidthType` keys.
"""

from __future__ import annotations

import unicodedata
from typing import Final

from aconitum.core.enum_mixins import KeyedStrEnum

MAX_CODE_POINT: Final[int] = 0x10FFFF


class EastAsianWidthType(KeyedStrEnum):
    """East Asian Width property values (UAX #11)."""

    AMBIGUOUS = ("ambiguous", "Ambiguous", ("A",))
    FULLWIDTH = ("fullwidth", "Fullwidth", ("F",))
    HALFWIDTH = ("halfwidth", "Halfwidth", ("H",))
    NARROW = ("narrow", "Narrow", ("Na",))
    WIDE = ("wide", "Wide", ("W",))
    NEUTRAL = ("neutral", "Neutral", ("N",))


_UCD_TO_TYPE: Final[dict[str, EastAsianWidthType]] = {
    "A": EastAsianWidthType.AMBIGUOUS,
    "F": EastAsianWidthType.FULLWIDTH,
    "H": EastAsianWidthType.HALFWIDTH,
    "Na": EastAsianWidthType.NARROW,
    "W": EastAsianWidthType.WIDE,
    "N": EastAsianWidthType.NEUTRAL,
}


def _validate(code_point: int) -> None:
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        raise TypeError(f"Expected a code point, got `{type(code_point).__name__}`.")
    if not 0 <= code_point <= MAX_CODE_POINT:
        raise ValueError(f"Code point out of range: {code_point:#x}")


def _ucd(code_point: int) -> str:
    return unicodedata.east_asian_width(chr(code_point))


def east_asian_width_type(code_point: int) -> EastAsianWidthType:
    """Return the East Asian Width category of ``code_point``.

    Raises:
        TypeError: If ``code_point`` is not an integer.
        ValueError: If ``code_point`` is outside the Unicode range.
    """
    _validate(code_point)
    return _UCD_TO_TYPE[_ucd(code_point)]


def is_full_width(code_point: int) -> bool:
    _validate(code_point)
    return _ucd(code_point) == "F"


def is_wide(code_point: int) -> bool:
    _validate(code_point)
    return _ucd(code_point) == "W"


def is_ambiguous(code_point: int) -> bool:
    _validate(code_point)
    return _ucd(code_point) == "A"


def is_narrow_width(code_point: int) -> bool:
    """Return True unless ``code_point`` is Fullwidth or Wide."""
    _validate(code_point)
    return _ucd(code_point) not in ("F", "W")


def east_asian_width(code_point: int, ambiguous_as_wide: bool = False) -> int:
    """Return the column width (1 or 2) of ``code_point``.

    Args:
        code_point (int): The code point to measure.
        ambiguous_as_wide (bool): Treat Ambiguous characters as wide, as East Asian
            legacy encodings do.

    Returns:
        int: ``2`` for Fullwidth and Wide (and optionally Ambiguous), else ``1``.
    """
    _validate(code_point)
    category = _ucd(code_point)
    if category in ("F", "W") or (ambiguous_as_wide and category == "A"):
        return 2
    return 1
