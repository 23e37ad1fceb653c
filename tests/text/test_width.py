# topmark:header:start
#
#   project      : Aconitum
#   file         : test_width.py
#   file_relpath : tests/text/test_width.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for `string_width` and friends."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from aconitum.text.width import string_length, string_width, widest_line
from tests.conftest import mark_hypothesis_slow, parametrize


@parametrize(
    "text, expected",
    [
        ("abcde", 5),
        ("古池や", 6),
        ("あいうabc", 9),
        ("ノード.js", 9),
        ("Ａ", 2),
        ("a\u0300", 1),
        ("\u200b", 0),
        ("\t", 0),
        ("", 0),
        ("❤\ufe0f", 2),
        ("❤", 1),
        ("\U0001f468\u200d\U0001f469\u200d\U0001f467", 2),
        ("\U0001f1fa\U0001f1f8", 2),
        ("\U0001f44d\U0001f3fd", 2),
        ("1\ufe0f\u20e3", 2),
    ],
)
def test_string_width(text: str, expected: int) -> None:
    """Wide, zero-width, combining and emoji clusters are measured correctly."""
    assert string_width(text) == expected


def test_string_width_ignores_ansi_by_default() -> None:
    """Escape sequences take no columns unless counting them is requested."""
    styled = "\x1b[1mabc\x1b[22m"
    assert string_width(styled) == 3
    assert string_width("\x1b[31m\x1b[39m") == 0
    assert string_width(styled, count_ansi_escape_codes=True) > 3


def test_ambiguous_characters() -> None:
    """Ambiguous characters are narrow unless asked otherwise."""
    assert string_width("±") == 1
    assert string_width("±", ambiguous_is_narrow=False) == 2


def test_default_ignorable_only_vanishes_alone() -> None:
    assert string_width("\u115f") == 0
    assert string_width("a\u2060b") == 2
    # Hangul choseong filler leading a syllable keeps its width.
    assert string_width("\u115f\u1161") == 2


def test_non_strings_measure_zero() -> None:
    """Anything that is not a string has width 0."""
    assert string_width(None) == 0  # type: ignore[arg-type]
    assert string_width(5) == 0  # type: ignore[arg-type]


def test_string_length_counts_graphemes() -> None:
    """Length is the number of user-perceived characters."""
    assert string_length("a\u0300b") == 2
    assert string_length("\x1b[1m\U0001f1fa\U0001f1f8\x1b[22m") == 1


def test_widest_line() -> None:
    """The widest line wins."""
    assert widest_line("a\nabc\nab") == 3
    assert widest_line("古\nabc") == 3
    assert widest_line("") == 0


@mark_hypothesis_slow
@given(st.text(), st.text())
def test_width_is_additive_for_ascii_prefixes(prefix: str, text: str) -> None:
    """Appending a printable ASCII string adds its length to the width."""
    ascii_text = "".join(ch for ch in text if " " <= ch <= "~")
    base = "".join(ch for ch in prefix if " " <= ch <= "~")
    assert string_width(base + ascii_text) == len(base) + len(ascii_text)
