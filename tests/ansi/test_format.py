# topmark:header:start
#
#   project      : Aconitum
#   file         : test_format.py
#   file_relpath : tests/ansi/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for ANSI-aware wrapping, trimming and slicing."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from aconitum.ansi.format import slice_ansi, trim_ansi, wrap_ansi
from aconitum.ansi.strip import strip_ansi
from aconitum.text.width import string_width
from tests.conftest import mark_hypothesis_slow, parametrize


def test_wrap_breaks_at_whitespace() -> None:
    """Soft wrapping breaks at the last space that fits and drops it."""
    assert wrap_ansi("The quick brown fox", 10) == "The quick\nbrown fox"


def test_wrap_breaks_long_words() -> None:
    """Words longer than the line are broken at the column limit."""
    assert wrap_ansi("abcdefghij", 4) == "abcd\nefgh\nij"
    assert wrap_ansi("abcdefghij", 4, hard_wrap=True) == "abcd\nefgh\nij"


def test_wrap_reopens_styles_on_continued_lines() -> None:
    """An open style is reset at the end of a line and re-opened on the next."""
    assert wrap_ansi("\x1b[31mabc def\x1b[39m", 3) == (
        "\x1b[31mabc\x1b[0m\n\x1b[31mdef\x1b[39m"
    )


def test_wrap_with_indent() -> None:
    """Continuation lines carry the indent, which counts toward the width."""
    text = "\x1b[31mThis is a long text that needs to be wrapped\x1b[0m"
    assert wrap_ansi(text, 40, indent="  ") == (
        "\x1b[31mThis is a long text that needs to be\x1b[0m\n  \x1b[31mwrapped\x1b[0m"
    )


def test_wrap_keeps_blank_lines_and_short_input() -> None:
    """Blank lines survive and short lines are returned unchanged."""
    assert wrap_ansi("a\n\nb", 5) == "a\n\nb"
    assert wrap_ansi("", 5) == ""
    assert wrap_ansi("anything", 0) == "anything"


def test_wrap_trim() -> None:
    """With trim, whitespace at line edges is removed."""
    assert wrap_ansi("   hello   ", 20, trim=True) == "hello"


def test_wrap_rejects_non_strings() -> None:
    """Non-string input raises a TypeError."""
    with pytest.raises(TypeError):
        wrap_ansi(None, 10)  # type: ignore[arg-type]


@parametrize(
    "raw, kwargs, expected",
    [
        ("  \x1b[1m hi \x1b[22m  ", {}, "\x1b[1mhi\x1b[22m"),
        ("  hi  ", {"start": False}, "  hi"),
        ("  hi  ", {"end": False}, "hi  "),
        ("   ", {}, ""),
    ],
)
def test_trim_ansi(raw: str, kwargs: dict[str, bool], expected: str) -> None:
    """Visible whitespace is trimmed, escape sequences are kept."""
    assert trim_ansi(raw, **kwargs) == expected


def test_slice_ansi_keeps_styles() -> None:
    """Styles active at the slice start are re-opened and closed at the end."""
    text = "\x1b[31mhello\x1b[39m world"
    assert slice_ansi(text, 1, 3) == "\x1b[31mel\x1b[0m"
    assert slice_ansi(text, 6) == "world"


def test_slice_ansi_skips_straddling_wide_characters() -> None:
    """A wide character cut by the end column is left out."""
    assert slice_ansi("古池や", 0, 3) == "古"


@mark_hypothesis_slow
@given(
    text=st.text(alphabet=string.ascii_letters + "  \n"),
    width=st.integers(min_value=2, max_value=30),
    hard=st.booleans(),
)
def test_wrap_lines_fit_the_width(text: str, width: int, hard: bool) -> None:
    """No wrapped line is wider than the requested width."""
    wrapped = wrap_ansi(text, width, hard_wrap=hard)
    assert all(string_width(line) <= width for line in wrapped.split("\n"))


@mark_hypothesis_slow
@given(
    text=st.text(alphabet=string.ascii_letters + string.digits + " "),
    start=st.integers(min_value=0, max_value=20),
    length=st.integers(min_value=0, max_value=20),
)
def test_slice_matches_plain_slicing(text: str, start: int, length: int) -> None:
    """On styled ASCII text, the visible slice equals plain string slicing."""
    styled = f"\x1b[1m{text}\x1b[22m"
    assert strip_ansi(slice_ansi(styled, start, start + length)) == text[start : start + length]
