# topmark:header:start
#
#   project      : Aconitum
#   file         : width.py
#   file_relpath : src/aconitum/text/width.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Display width of strings in terminal columns.

The width of a string is the sum of the widths of its grapheme clusters:
    - zero for control characters, zero-width and default-ignorable code points,
      combining marks, and variation selectors leading a cluster;
    - two for emoji clusters;
    - otherwise the East Asian Width of the first code point, plus the width of
      any Halfwidth/Fullwidth Forms (U+FF00-U+FFEF) following it in the cluster.

ANSI escape sequences are stripped before measuring unless asked otherwise.
"""

from __future__ import annotations

import bisect
from typing import TYPE_CHECKING, Final

from aconitum.ansi.strip import strip_ansi
from aconitum.config.logging import get_logger
from aconitum.text.east_asian_width import east_asian_width
from aconitum.text.emoji import is_emoji_cluster
from aconitum.text.graphemes import iter_graphemes

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

# Default_Ignorable_Code_Point (DerivedCoreProperties.txt)
DEFAULT_IGNORABLE_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x00AD, 0x00AD),
    (0x034F, 0x034F),
    (0x061C, 0x061C),
    (0x115F, 0x1160),
    (0x17B4, 0x17B5),
    (0x180B, 0x180F),
    (0x200B, 0x200F),
    (0x202A, 0x202E),
    (0x2060, 0x206F),
    (0x3164, 0x3164),
    (0xFE00, 0xFE0F),
    (0xFEFF, 0xFEFF),
    (0xFFA0, 0xFFA0),
    (0xFFF0, 0xFFF8),
    (0x1BCA0, 0x1BCA3),
    (0x1D173, 0x1D17A),
    (0xE0000, 0xE0FFF),
)

_IGNORABLE_STARTS: Final[list[int]] = [start for start, _ in DEFAULT_IGNORABLE_RANGES]

COMBINING_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x0300, 0x036F),  # Combining Diacritical Marks
    (0x1AB0, 0x1AFF),  # Combining Diacritical Marks Extended
    (0x1DC0, 0x1DFF),  # Combining Diacritical Marks Supplement
    (0x20D0, 0x20FF),  # Combining Diacritical Marks for Symbols
    (0xFE20, 0xFE2F),  # Combining Half Marks
)


def is_default_ignorable(code_point: int) -> bool:
    i = bisect.bisect_right(_IGNORABLE_STARTS, code_point) - 1
    return i >= 0 and DEFAULT_IGNORABLE_RANGES[i][0] <= code_point <= DEFAULT_IGNORABLE_RANGES[i][1]


def is_zero_width(code_point: int) -> bool:
    """Return True if a cluster led by ``code_point`` takes no columns."""
    if code_point <= 0x1F or 0x7F <= code_point <= 0x9F:
        return True
    if 0x200B <= code_point <= 0x200F or code_point == 0xFEFF:
        return True
    if any(lo <= code_point <= hi for lo, hi in COMBINING_RANGES):
        return True
    if 0xD800 <= code_point <= 0xDFFF:
        return True
    return 0xFE00 <= code_point <= 0xFE0F


def cluster_width(cluster: str, *, ambiguous_as_wide: bool = False) -> int:
    """Return the column width of one grapheme cluster."""
    code_point = ord(cluster[0])
    if is_zero_width(code_point):
        return 0
    # A default-ignorable code point only vanishes on its own; U+115F still leads
    # a Hangul syllable.
    if len(cluster) == 1 and is_default_ignorable(code_point):
        return 0
    if is_emoji_cluster(cluster):
        return 2

    width = east_asian_width(code_point, ambiguous_as_wide)
    for ch in cluster[1:]:
        cp = ord(ch)
        if 0xFF00 <= cp <= 0xFFEF:
            width += east_asian_width(cp, ambiguous_as_wide)
    return width


def string_width(
    text: str,
    *,
    ambiguous_is_narrow: bool = True,
    count_ansi_escape_codes: bool = False,
) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Args:
        text (str): The string to measure. Non-strings measure as 0.
        ambiguous_is_narrow (bool): Count East Asian Ambiguous characters as
            narrow (the default) instead of wide.
        count_ansi_escape_codes (bool): Measure escape sequences as regular text
            instead of stripping them first.

    Returns:
        int: The display width.

    Example:
        ```python
        >>> string_width("古池や")
        6
        >>> string_width("\\x1b[1mabc\\x1b[22m")
        3
        ```
    """
    if not isinstance(text, str) or not text:
        return 0
    if not count_ansi_escape_codes:
        text = strip_ansi(text)
    if not text:
        return 0

    ambiguous_as_wide = not ambiguous_is_narrow
    return sum(cluster_width(c, ambiguous_as_wide=ambiguous_as_wide) for c in iter_graphemes(text))


def string_length(text: str, *, count_ansi_escape_codes: bool = False) -> int:
    """Return the number of grapheme clusters (user-perceived characters) in ``text``."""
    if not isinstance(text, str) or not text:
        return 0
    if not count_ansi_escape_codes:
        text = strip_ansi(text)
    return sum(1 for _ in iter_graphemes(text))


def widest_line(text: str) -> int:
    """Return the width of the widest line in ``text``."""
    widest = max((string_width(line) for line in text.splitlines()), default=0)
    logger.trace("widest_line: %d column(s) over %d char(s)", widest, len(text))
    return widest
