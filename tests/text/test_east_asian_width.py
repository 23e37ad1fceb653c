# topmark:header:start
#
#   project      : Aconitum
#   file         : test_east_asian_width.py
#   file_relpath : tests/text/test_east_asian_width.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for East Asian Width lookups."""

from __future__ import annotations

import pytest

from aconitum.text.east_asian_width import (
    EastAsianWidthType,
    east_asian_width,
    east_asian_width_type,
    is_ambiguous,
    is_full_width,
    is_narrow_width,
    is_wide,
)
from tests.conftest import parametrize


@parametrize(
    "char, expected",
    [
        ("古", EastAsianWidthType.WIDE),
        ("a", EastAsianWidthType.NARROW),
        ("±", EastAsianWidthType.AMBIGUOUS),
        ("Ａ", EastAsianWidthType.FULLWIDTH),
        ("｡", EastAsianWidthType.HALFWIDTH),
        ("\x00", EastAsianWidthType.NEUTRAL),
    ],
)
def test_east_asian_width_type(char: str, expected: EastAsianWidthType) -> None:
    """Each category is reported with its stable key."""
    assert east_asian_width_type(ord(char)) is expected


def test_predicates_and_width() -> None:
    """Predicates agree with the column width."""
    assert is_wide(ord("古")) and not is_narrow_width(ord("古"))
    assert is_full_width(ord("Ａ"))
    assert is_ambiguous(ord("±"))
    assert east_asian_width(ord("古")) == 2
    assert east_asian_width(ord("a")) == 1
    assert east_asian_width(ord("±")) == 1
    assert east_asian_width(ord("±"), ambiguous_as_wide=True) == 2


def test_parse_accepts_ucd_abbreviations() -> None:
    """The UCD short names are accepted as aliases."""
    assert EastAsianWidthType.parse("W") is EastAsianWidthType.WIDE
    assert EastAsianWidthType.parse("na") is EastAsianWidthType.NARROW


def test_invalid_code_points() -> None:
    """Non-integers raise TypeError, out-of-range values raise ValueError."""
    with pytest.raises(TypeError):
        east_asian_width("a")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        east_asian_width(-1)
    with pytest.raises(ValueError):
        east_asian_width(0x110000)
