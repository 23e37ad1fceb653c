# topmark:header:start
#
#   project      : Aconitum
#   file         : graphemes.py
#   file_relpath : src/aconitum/text/graphemes.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Extended grapheme cluster segmentation (a practical subset of UAX #29).

Implemented boundary rules:
    - GB3-GB5: CR LF stays together; other controls stand alone.
    - GB6-GB8: Hangul syllable sequences (L, V, T, LV, LVT).
    - GB9/GB9a: no break before Extend, ZWJ or SpacingMark characters.
    - GB11: emoji ZWJ sequences (``Pictographic Extend* ZWJ x Pictographic``).
    - GB12/GB13: regional indicators pair up into flags.

Prepend characters (GB9b) and the Indic conjunct rule (GB9c) are not applied;
such clusters split into more than one segment.
"""

from __future__ import annotations

import unicodedata
from enum import Enum, auto
from typing import TYPE_CHECKING

from aconitum.text.emoji import (
    ZWJ,
    is_emoji_modifier,
    is_extended_pictographic,
    is_regional_indicator,
    is_tag,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class _Kind(Enum):
    CR = auto()
    LF = auto()
    CONTROL = auto()
    EXTEND = auto()
    ZWJ = auto()
    SPACING_MARK = auto()
    REGIONAL_INDICATOR = auto()
    L = auto()
    V = auto()
    T = auto()
    LV = auto()
    LVT = auto()
    OTHER = auto()


_HANGUL_BASE = 0xAC00
_HANGUL_END = 0xD7A3
_HANGUL_T_COUNT = 28


def _kind(ch: str) -> _Kind:
    cp = ord(ch)
    if cp == 0x0D:
        return _Kind.CR
    if cp == 0x0A:
        return _Kind.LF
    if cp == ZWJ:
        return _Kind.ZWJ
    if is_regional_indicator(cp):
        return _Kind.REGIONAL_INDICATOR

    if 0x1100 <= cp <= 0x115F or 0xA960 <= cp <= 0xA97C:
        return _Kind.L
    if 0x1160 <= cp <= 0x11A7 or 0xD7B0 <= cp <= 0xD7C6:
        return _Kind.V
    if 0x11A8 <= cp <= 0x11FF or 0xD7CB <= cp <= 0xD7FB:
        return _Kind.T
    if _HANGUL_BASE <= cp <= _HANGUL_END:
        return _Kind.LV if (cp - _HANGUL_BASE) % _HANGUL_T_COUNT == 0 else _Kind.LVT

    category = unicodedata.category(ch)
    if (
        category in ("Mn", "Me")
        or is_emoji_modifier(cp)
        or is_tag(cp)
        or cp == 0x200C
        or 0xFF9E <= cp <= 0xFF9F
    ):
        return _Kind.EXTEND
    if category == "Mc":
        return _Kind.SPACING_MARK
    if category in ("Cc", "Zl", "Zp", "Cs") or (category == "Cf" and cp != 0x200C):
        return _Kind.CONTROL
    return _Kind.OTHER


_HANGUL_NEXT: dict[_Kind, tuple[_Kind, ...]] = {
    _Kind.L: (_Kind.L, _Kind.V, _Kind.LV, _Kind.LVT),
    _Kind.LV: (_Kind.V, _Kind.T),
    _Kind.V: (_Kind.V, _Kind.T),
    _Kind.LVT: (_Kind.T,),
    _Kind.T: (_Kind.T,),
}


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` in order."""
    if not text:
        return

    start = 0
    prev = _kind(text[0])
    # GB11 state: current cluster is Pictographic Extend* (ZWJ)?
    pictographic = is_extended_pictographic(ord(text[0]))
    ri_count = 1 if prev is _Kind.REGIONAL_INDICATOR else 0

    for i in range(1, len(text)):
        ch = text[i]
        cur = _kind(ch)
        join: bool

        if prev is _Kind.CR and cur is _Kind.LF:
            join = True
        elif prev in (_Kind.CR, _Kind.LF, _Kind.CONTROL) or cur in (
            _Kind.CR,
            _Kind.LF,
            _Kind.CONTROL,
        ):
            join = False
        elif cur in _HANGUL_NEXT.get(prev, ()):
            join = True
        elif cur in (_Kind.EXTEND, _Kind.ZWJ, _Kind.SPACING_MARK):
            join = True
        elif prev is _Kind.ZWJ and pictographic and is_extended_pictographic(ord(ch)):
            join = True
        elif prev is _Kind.REGIONAL_INDICATOR and cur is _Kind.REGIONAL_INDICATOR:
            join = ri_count % 2 == 1
        else:
            join = False

        if not join:
            yield text[start:i]
            start = i
            pictographic = is_extended_pictographic(ord(ch))
            ri_count = 0
        elif cur not in (_Kind.EXTEND, _Kind.ZWJ) and not is_extended_pictographic(ord(ch)):
            pictographic = False

        if cur is _Kind.REGIONAL_INDICATOR:
            ri_count += 1
        prev = cur

    yield text[start:]


def graphemes(text: str) -> list[str]:
    """Split ``text`` into user-perceived characters.

    Example:
        ```python
        >>> graphemes("e\\u0301\\U0001f1ef\\U0001f1f5")
        ['é', '🇯🇵']
        ```
    """
    return list(iter_graphemes(text))
