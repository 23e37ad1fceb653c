# topmark:header:start
#
#   project      : Aconitum
#   file         : styles.py
#   file_relpath : src/aconitum/ansi/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""SGR style tables and color-space conversion helpers.

Every named style is a `Style` holding the *open* and *close* escape strings:

    ```python
    >>> from aconitum.ansi import styles
    >>> styles.STYLES["bold"].open + "hi" + styles.STYLES["bold"].close
    '\\x1b[1mhi\\x1b[22m'
    ```

The ``color`` and ``bg_color`` groups additionally render arbitrary 16, 256 and
truecolor codes (``ansi``, ``ansi256``, ``ansi16m``), and the module-level
converters map RGB and hex colors down to the 256 and 16 color palettes.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Final

ANSI_BACKGROUND_OFFSET: Final[int] = 10

# name -> (open code, close code)
MODIFIER_CODES: Final[dict[str, tuple[int, int]]] = {
    "reset": (0, 0),
    # 21 isn't widely supported and 22 does the same thing
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "overline": (53, 55),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
}

FOREGROUND_CODES: Final[dict[str, tuple[int, int]]] = {
    "black": (30, 39),
    "red": (31, 39),
    "green": (32, 39),
    "yellow": (33, 39),
    "blue": (34, 39),
    "magenta": (35, 39),
    "cyan": (36, 39),
    "white": (37, 39),
    "black_bright": (90, 39),
    "gray": (90, 39),
    "grey": (90, 39),
    "red_bright": (91, 39),
    "green_bright": (92, 39),
    "yellow_bright": (93, 39),
    "blue_bright": (94, 39),
    "magenta_bright": (95, 39),
    "cyan_bright": (96, 39),
    "white_bright": (97, 39),
}

BACKGROUND_CODES: Final[dict[str, tuple[int, int]]] = {
    f"bg_{name}": (open_code + ANSI_BACKGROUND_OFFSET, 49)
    for name, (open_code, _close) in FOREGROUND_CODES.items()
}

modifier_names: Final[list[str]] = list(MODIFIER_CODES)
foreground_color_names: Final[list[str]] = list(FOREGROUND_CODES)
background_color_names: Final[list[str]] = list(BACKGROUND_CODES)
color_names: Final[list[str]] = [*foreground_color_names, *background_color_names]


def _sgr(code: int) -> str:
    return f"\x1b[{code}m"


@dataclass(frozen=True)
class Style:
    """Open/close escape pair for one SGR style."""

    open: str
    close: str

    def apply(self, text: str) -> str:
        """Wrap ``text`` in this style."""
        return f"{self.open}{text}{self.close}"


def _build(table: dict[str, tuple[int, int]]) -> dict[str, Style]:
    return {name: Style(_sgr(o), _sgr(c)) for name, (o, c) in table.items()}


def ansi(code: int, offset: int = 0) -> str:
    """Return the 16-color escape for ``code`` (plus ``offset`` for backgrounds)."""
    return _sgr(code + offset)


def ansi256(code: int, offset: int = 0) -> str:
    """Return the 256-color escape selecting palette entry ``code``."""
    return f"\x1b[{38 + offset};5;{code}m"


def ansi16m(red: int, green: int, blue: int, offset: int = 0) -> str:
    """Return the truecolor escape for an RGB triple."""
    return f"\x1b[{38 + offset};2;{red};{green};{blue}m"


@dataclass(frozen=True)
class ColorGroup:
    """A foreground or background color group.

    Attributes:
        offset (int): ``0`` for foreground, ``10`` for background codes.
        close (str): The escape resetting this group to the terminal default.
        styles (dict[str, Style]): Named colors of the group.
    """

    offset: int
    close: str
    styles: dict[str, Style] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Style:
        return self.styles[name]

    def ansi(self, code: int) -> str:
        """Render a 16-color code for this group."""
        return ansi(code, self.offset)

    def ansi256(self, code: int) -> str:
        """Render a 256-color palette entry for this group."""
        return ansi256(code, self.offset)

    def ansi16m(self, red: int, green: int, blue: int) -> str:
        """Render a truecolor RGB triple for this group."""
        return ansi16m(red, green, blue, self.offset)


modifier: Final[dict[str, Style]] = _build(MODIFIER_CODES)
color: Final[ColorGroup] = ColorGroup(0, _sgr(39), _build(FOREGROUND_CODES))
bg_color: Final[ColorGroup] = ColorGroup(
    ANSI_BACKGROUND_OFFSET, _sgr(49), _build(BACKGROUND_CODES)
)

STYLES: Final[dict[str, Style]] = {**modifier, **color.styles, **bg_color.styles}

# open code -> close code
codes: Final[dict[int, int]] = {
    o: c
    for table in (MODIFIER_CODES, FOREGROUND_CODES, BACKGROUND_CODES)
    for o, c in table.values()
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rgb_to_ansi256(red: int, green: int, blue: int) -> int:
    """Map an RGB color onto the xterm 256-color palette.

    Greys use the 24-step greyscale ramp (232-255) except for near black and near
    white, which map to the cube corners 16 and 231.
    """
    if red == green == blue:
        if red < 8:
            return 16
        if red > 248:
            return 231
        return _round_half_up(((red - 8) / 247) * 24) + 232

    return (
        16
        + 36 * _round_half_up(red / 255 * 5)
        + 6 * _round_half_up(green / 255 * 5)
        + _round_half_up(blue / 255 * 5)
    )


_HEX_RE: Final[re.Pattern[str]] = re.compile(r"[a-f0-9]{6}|[a-f0-9]{3}", re.IGNORECASE)


def hex_to_rgb(hex_color: str | int) -> tuple[int, int, int]:
    """Parse a 3 or 6 digit hex color (``#`` optional) into an RGB triple.

    Integers are rendered in base 16 first. Unparsable input yields ``(0, 0, 0)``.
    """
    text = format(hex_color, "x") if isinstance(hex_color, int) else hex_color
    m = _HEX_RE.search(text)
    if m is None:
        return (0, 0, 0)
    color_string = m.group(0)
    if len(color_string) == 3:
        color_string = "".join(ch * 2 for ch in color_string)
    value = int(color_string, 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def hex_to_ansi256(hex_color: str | int) -> int:
    """Map a hex color onto the 256-color palette."""
    return rgb_to_ansi256(*hex_to_rgb(hex_color))


def ansi256_to_ansi(code: int) -> int:
    """Reduce a 256-color palette entry to a 16-color foreground code (30-37, 90-97)."""
    if code < 8:
        return 30 + code
    if code < 16:
        return 90 + (code - 8)

    if code >= 232:
        red = green = blue = (((code - 232) * 10) + 8) / 255
    else:
        code -= 16
        remainder = code % 36
        red = (code // 36) / 5
        green = (remainder // 6) / 5
        blue = (remainder % 6) / 5

    value = max(red, green, blue) * 2
    if value == 0:
        return 30

    result = 30 + (
        (_round_half_up(blue) << 2) | (_round_half_up(green) << 1) | _round_half_up(red)
    )
    if value == 2:
        result += 60
    return result


def rgb_to_ansi(red: int, green: int, blue: int) -> int:
    """Map an RGB color onto a 16-color foreground code."""
    return ansi256_to_ansi(rgb_to_ansi256(red, green, blue))


def hex_to_ansi(hex_color: str | int) -> int:
    """Map a hex color onto a 16-color foreground code."""
    return ansi256_to_ansi(hex_to_ansi256(hex_color))
