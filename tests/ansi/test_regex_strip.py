# topmark:header:start
#
#   project      : Aconitum
#   file         : test_regex_strip.py
#   file_relpath : tests/ansi/test_regex_strip.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for the ANSI escape regex and `strip_ansi`."""

from __future__ import annotations

import pytest

from aconitum.ansi.regex import ansi_regex
from aconitum.ansi.strip import strip_ansi
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("\x1b[4mcake\x1b[0m", "cake"),
        ("\x1b[0m\x1b[4m\x1b[42m\x1b[31mfoo\x1b[39m\x1b[49m\x1b[24mfoo\x1b[0m", "foofoo"),
        ("\x9b31mred\x9b39m", "red"),
        ("\x1b[2K\x1b[1A\x1b[G", ""),
        ("\x1b]8;;https://example.com\x07link\x1b]8;;\x07", "link"),
        ("\x1b]0;title\x1b\\text", "text"),
        ("plain text", "plain text"),
    ],
)
def test_strip_ansi_removes_sequences(raw: str, expected: str) -> None:
    """SGR, cursor and OSC sequences are removed, visible text is kept."""
    assert strip_ansi(raw) == expected


def test_ansi_regex_finds_each_sequence() -> None:
    """The pattern matches every sequence on its own."""
    assert ansi_regex().findall("\x1b[4mcake\x1b[0m") == ["\x1b[4m", "\x1b[0m"]


def test_ansi_regex_only_first_uses_the_same_pattern() -> None:
    """`only_first` returns the same compiled pattern; `search` finds the first match."""
    pattern = ansi_regex(only_first=True)
    assert pattern is ansi_regex()
    m = pattern.search("a\x1b[1mb\x1b[22m")
    assert m is not None and m.group(0) == "\x1b[1m"


def test_strip_ansi_rejects_non_strings() -> None:
    """Non-string input raises a TypeError."""
    with pytest.raises(TypeError):
        strip_ansi(42)  # type: ignore[arg-type]
