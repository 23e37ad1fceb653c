# topmark:header:start
#
#   project      : Aconitum
#   file         : test_styles.py
#   file_relpath : tests/ansi/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for SGR style tables and color conversions."""

from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from aconitum.ansi import styles
from aconitum.ansi.strip import strip_ansi
from aconitum.text.width import string_width
from tests.conftest import mark_hypothesis_slow, parametrize


def test_named_styles_have_open_and_close_codes() -> None:
    """Modifiers and colors expose matching open/close sequences."""
    assert styles.STYLES["bold"].apply("hi") == "\x1b[1mhi\x1b[22m"
    assert styles.STYLES["red"].open == "\x1b[31m"
    assert styles.STYLES["red"].close == "\x1b[39m"
    assert styles.STYLES["bg_red"].open == "\x1b[41m"
    assert styles.STYLES["bg_red"].close == "\x1b[49m"
    assert styles.STYLES["gray"] == styles.STYLES["black_bright"]


def test_codes_map_open_to_close() -> None:
    """The `codes` table maps each open code to its close code."""
    assert styles.codes[1] == 22
    assert styles.codes[31] == 39
    assert styles.codes[101] == 49


def test_color_groups_render_extended_colors() -> None:
    """Foreground and background groups render 16, 256 and truecolor codes."""
    assert styles.color.ansi(31) == "\x1b[31m"
    assert styles.bg_color.ansi(31) == "\x1b[41m"
    assert styles.color.ansi256(196) == "\x1b[38;5;196m"
    assert styles.bg_color.ansi256(196) == "\x1b[48;5;196m"
    assert styles.color.ansi16m(255, 128, 0) == "\x1b[38;2;255;128;0m"
    assert styles.bg_color.ansi16m(255, 128, 0) == "\x1b[48;2;255;128;0m"


@parametrize(
    "rgb, expected",
    [
        ((255, 0, 0), 196),
        ((0, 0, 0), 16),
        ((255, 255, 255), 231),
        ((128, 128, 128), 244),
    ],
)
def test_rgb_to_ansi256(rgb: tuple[int, int, int], expected: int) -> None:
    """RGB maps onto the color cube, greys onto the greyscale ramp."""
    assert styles.rgb_to_ansi256(*rgb) == expected


def test_hex_conversions() -> None:
    """Hex colors accept 3 or 6 digits, with or without '#', and integers."""
    assert styles.hex_to_rgb("#FF0000") == (255, 0, 0)
    assert styles.hex_to_rgb("abc") == (170, 187, 204)
    assert styles.hex_to_rgb(0xFF8000) == (255, 128, 0)
    assert styles.hex_to_rgb("nothex") == (0, 0, 0)
    assert styles.hex_to_ansi256("#ff0000") == 196


def test_reduce_to_16_colors() -> None:
    """256-color entries reduce to the 16 basic foreground codes."""
    assert styles.ansi256_to_ansi(1) == 31
    assert styles.ansi256_to_ansi(9) == 91
    assert styles.ansi256_to_ansi(16) == 30
    assert styles.rgb_to_ansi(255, 0, 0) == 91
    assert styles.hex_to_ansi("#000000") == 30


@mark_hypothesis_slow
@given(
    text=st.text(alphabet=string.ascii_letters + string.digits + " "),
    name=st.sampled_from(sorted(styles.STYLES)),
)
def test_styling_does_not_change_visible_text(text: str, name: str) -> None:
    """Applying any style keeps the visible text and its width."""
    styled = styles.STYLES[name].apply(text)
    assert strip_ansi(styled) == text
    assert string_width(styled) == string_width(text)


def test_style_name_lists() -> None:
    assert styles.modifier_names[:3] == ["reset", "bold", "dim"]
    assert "gray" in styles.foreground_color_names
    assert "bg_grey" in styles.background_color_names
    assert styles.color_names == [
        *styles.foreground_color_names,
        *styles.background_color_names,
    ]
    assert len(styles.background_color_names) == len(styles.foreground_color_names)
