# topmark:header:start
#
#   project      : Aconitum
#   file         : emoji.py
#   file_relpath : src/aconitum/text/emoji.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Emoji classification for grapheme clusters.

``unicodedata`` does not expose the emoji properties, so this module carries the
Extended_Pictographic ranges from ``emoji-data.txt`` and derives
Emoji_Presentation from them: pictographs the UCD marks as East Asian Wide
render as emoji by default.

An emoji *cluster* is one of:
    - a regional indicator pair (flag);
    - a keycap sequence (``[0-9#*] FE0F? 20E3``);
    - a tag sequence (black flag followed by tag characters);
    - a pictograph with emoji presentation, optionally modified or joined by ZWJ;
    - a text-default pictograph forced to emoji presentation with ``FE0F``.
"""

from __future__ import annotations

import bisect
import re
import unicodedata
from functools import lru_cache
from typing import Final

ZWJ: Final[int] = 0x200D
VS15: Final[int] = 0xFE0E
VS16: Final[int] = 0xFE0F
KEYCAP: Final[int] = 0x20E3
CANCEL_TAG: Final[int] = 0xE007F
BLACK_FLAG: Final[int] = 0x1F3F4

EXTENDED_PICTOGRAPHIC_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x2388, 0x2388),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x2605),
    (0x2607, 0x2612),
    (0x2614, 0x2685),
    (0x2690, 0x2705),
    (0x2708, 0x2712),
    (0x2714, 0x2714),
    (0x2716, 0x2716),
    (0x271D, 0x271D),
    (0x2721, 0x2721),
    (0x2728, 0x2728),
    (0x2733, 0x2734),
    (0x2744, 0x2744),
    (0x2747, 0x2747),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2757, 0x2757),
    (0x2763, 0x2767),
    (0x2795, 0x2797),
    (0x27A1, 0x27A1),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1F0FF),
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1AD, 0x1F1E5),
    (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F),
    (0x1F249, 0x1F3FA),
    (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F),
    (0x1F680, 0x1F6FF),
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)

_RANGE_STARTS: Final[list[int]] = [start for start, _ in EXTENDED_PICTOGRAPHIC_RANGES]

EMOJI_MODIFIERS: Final[tuple[int, int]] = (0x1F3FB, 0x1F3FF)
REGIONAL_INDICATORS: Final[tuple[int, int]] = (0x1F1E6, 0x1F1FF)
TAG_CHARACTERS: Final[tuple[int, int]] = (0xE0020, 0xE007F)
KEYCAP_BASES: Final[str] = "0123456789#*"


def is_extended_pictographic(code_point: int) -> bool:
    """Return True if ``code_point`` has the Extended_Pictographic property."""
    i = bisect.bisect_right(_RANGE_STARTS, code_point) - 1
    if i < 0:
        return False
    start, end = EXTENDED_PICTOGRAPHIC_RANGES[i]
    return start <= code_point <= end


def is_emoji_presentation(code_point: int) -> bool:
    """Return True for pictographs that render as emoji without a selector."""
    if not is_extended_pictographic(code_point):
        return False
    return unicodedata.east_asian_width(chr(code_point)) == "W"


def is_emoji_modifier(code_point: int) -> bool:
    return EMOJI_MODIFIERS[0] <= code_point <= EMOJI_MODIFIERS[1]


def is_regional_indicator(code_point: int) -> bool:
    return REGIONAL_INDICATORS[0] <= code_point <= REGIONAL_INDICATORS[1]


def is_tag(code_point: int) -> bool:
    return TAG_CHARACTERS[0] <= code_point <= TAG_CHARACTERS[1]


def is_emoji_cluster(cluster: str) -> bool:
    """Return True if the grapheme ``cluster`` renders as a (double width) emoji.

    Args:
        cluster (str): A single extended grapheme cluster, as produced by
            [`graphemes`][aconitum.text.graphemes.graphemes].

    Returns:
        bool: Whether the cluster is displayed as an emoji.
    """
    if not cluster:
        return False
    cps = [ord(ch) for ch in cluster]
    first = cps[0]

    if is_regional_indicator(first):
        return len(cps) >= 2 and is_regional_indicator(cps[1])

    if chr(first) in KEYCAP_BASES:
        return KEYCAP in cps

    if not is_extended_pictographic(first):
        return False

    if VS15 in cps[1:2]:
        # Explicit text presentation
        return False

    if is_emoji_presentation(first):
        return True

    rest = cps[1:]
    return (
        VS16 in rest
        or ZWJ in rest
        or any(is_emoji_modifier(cp) for cp in rest)
        or (first == BLACK_FLAG and any(is_tag(cp) for cp in rest))
    )


def _char_class(code_points: list[int]) -> str:
    """Render sorted code points as a regex character class body."""
    parts: list[str] = []
    i = 0
    while i < len(code_points):
        j = i
        while j + 1 < len(code_points) and code_points[j + 1] == code_points[j] + 1:
            j += 1
        lo, hi = code_points[i], code_points[j]
        if lo == hi:
            parts.append(re.escape(chr(lo)))
        else:
            parts.append(f"{re.escape(chr(lo))}-{re.escape(chr(hi))}")
        i = j + 1
    return "".join(parts)


@lru_cache(maxsize=None)
def _emoji_pattern() -> re.Pattern[str]:
    pictographic = [cp for lo, hi in EXTENDED_PICTOGRAPHIC_RANGES for cp in range(lo, hi + 1)]
    presentation = [cp for cp in pictographic if is_emoji_presentation(cp)]

    pict = f"[{_char_class(pictographic)}]"
    pres = f"[{_char_class(presentation)}]"
    modifier = "[\U0001f3fb-\U0001f3ff]"
    element = f"(?:{pres}(?:{modifier}|\ufe0f)?|{pict}(?:\ufe0f|{modifier}))"
    joined = f"{element}(?:\u200d(?:{element}|{pict}))*"
    tag_sequence = "\U0001f3f4[\U000e0020-\U000e007e]+\U000e007f"
    keycap = "[0-9#*]\ufe0f?\u20e3"
    flag = "[\U0001f1e6-\U0001f1ff]{2}"

    return re.compile("|".join((tag_sequence, keycap, flag, joined)))


def emoji_regex() -> re.Pattern[str]:
    """Return a compiled pattern matching emoji clusters.

    Example:
        ```python
        >>> emoji_regex().findall("I \\u2764\\ufe0f coding")
        ['\\u2764\\ufe0f']
        ```
    """
    return _emoji_pattern()
