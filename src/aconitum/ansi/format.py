# topmark:header:start
#
#   project      : Aconitum
#   file         : format.py
#   file_relpath : src/aconitum/ansi/format.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""ANSI-aware text layout: wrapping, trimming and column slicing.

All three helpers measure *visible* text in terminal columns (see
[`string_width`][aconitum.text.width.string_width]) and keep escape sequences
intact. Styling that is open where a line is cut is closed with a reset at the
end of that line and re-opened at the start of the next one, so every emitted
line renders correctly on its own.
"""

from __future__ import annotations

import re
from typing import Final, NamedTuple

from aconitum.ansi.regex import ansi_regex
from aconitum.ansi.strip import strip_ansi
from aconitum.ansi.styles import codes as sgr_codes
from aconitum.config.logging import get_logger
from aconitum.text.graphemes import iter_graphemes
from aconitum.text.width import string_width

logger = get_logger(__name__)

RESET: Final[str] = "\x1b[0m"
_RESET_CODES: Final[frozenset[str]] = frozenset({"\x1b[0m", "\x1b[m", "\x9b0m", "\x9bm"})
_CLOSE_CODES: Final[frozenset[int]] = frozenset(sgr_codes.values())
_SGR_RE: Final[re.Pattern[str]] = re.compile(r"(?:\x1b\[|\x9b)(\d*)m")


class _Token(NamedTuple):
    text: str
    is_escape: bool


def _tokenize(text: str) -> list[_Token]:
    """Split ``text`` into escape sequences and visible grapheme clusters."""
    tokens: list[_Token] = []
    pos = 0
    for m in ansi_regex().finditer(text):
        tokens.extend(_Token(g, False) for g in iter_graphemes(text[pos : m.start()]))
        tokens.append(_Token(m.group(0), True))
        pos = m.end()
    tokens.extend(_Token(g, False) for g in iter_graphemes(text[pos:]))
    return tokens


def _sgr_number(code: str) -> int | None:
    m = _SGR_RE.fullmatch(code)
    return int(m.group(1) or 0) if m else None


def _track_style(state: list[str], code: str) -> None:
    """Update the list of active SGR codes with ``code``.

    A close code (e.g. ``39``) drops the open codes it ends; compound codes such
    as ``1;31`` are kept as they are.
    """
    if code in _RESET_CODES:
        state.clear()
        return
    if not code.endswith("m"):
        return
    number = _sgr_number(code)
    if number is not None and number in _CLOSE_CODES:
        state[:] = [s for s in state if sgr_codes.get(_sgr_number(s) or -1) != number]
    else:
        state.append(code)


def _visible_width(tokens: list[_Token]) -> int:
    return sum(string_width(t.text) for t in tokens if not t.is_escape)


def _has_visible(tokens: list[_Token]) -> bool:
    return any(not t.is_escape for t in tokens)


def _require_str(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")


def trim_ansi(text: str, *, start: bool = True, end: bool = True) -> str:
    """Strip leading and/or trailing visible whitespace, keeping escape sequences.

    Args:
        text (str): Text that may contain escape sequences.
        start (bool): Trim whitespace at the start.
        end (bool): Trim whitespace at the end.

    Returns:
        str: The trimmed text; ``""`` if nothing visible remains.

    Raises:
        TypeError: If ``text`` is not a string.
    """
    _require_str(text)
    if not start and not end:
        return text
    if not strip_ansi(text).strip():
        return ""

    tokens = _tokenize(text)
    visible = [i for i, t in enumerate(tokens) if not t.is_escape and not t.text.isspace()]
    first, last = visible[0], visible[-1]

    out: list[str] = []
    for i, token in enumerate(tokens):
        if token.is_escape:
            out.append(token.text)
        elif (not start or i >= first) and (not end or i <= last):
            out.append(token.text)
    return "".join(out)


def _split_index(tokens: list[_Token], width: int, hard_wrap: bool) -> tuple[int, int]:
    """Return ``(row_end, rest_start)`` token indices for a line wider than ``width``.

    Soft wrapping breaks at the last whitespace that fits and drops it; a word
    longer than the line is broken at the column limit. At least one visible
    cluster always goes to the row.
    """
    col = 0
    last_space: int | None = None
    for i, token in enumerate(tokens):
        if token.is_escape:
            continue
        w = string_width(token.text)
        if col + w > width:
            if not hard_wrap:
                if token.text.isspace():
                    return i, i + 1
                if last_space is not None:
                    return last_space, last_space + 1
            if col == 0:
                return i + 1, i + 1
            return i, i
        col += w
        # whitespace at the start of a row is not a break opportunity
        if token.text.isspace() and col > w:
            last_space = i
    return len(tokens), len(tokens)


def _wrap_line(line: str, width: int, *, trim: bool, hard_wrap: bool) -> list[str]:
    tokens = _tokenize(line)
    rows: list[str] = []
    state: list[str] = []

    while True:
        prefix = "".join(state)
        if _visible_width(tokens) <= width:
            rows.append(prefix + "".join(t.text for t in tokens))
            break

        row_end, rest_start = _split_index(tokens, width, hard_wrap)
        row, rest = tokens[:row_end], tokens[rest_start:]
        if trim:
            while rest and not rest[0].is_escape and rest[0].text.isspace():
                rest = rest[1:]
        if not _has_visible(rest):
            row, rest = row + rest, []

        for token in row:
            if token.is_escape:
                _track_style(state, token.text)

        text = prefix + "".join(t.text for t in row)
        if trim:
            text = trim_ansi(text, start=False)
        if state and rest:
            text += RESET
        rows.append(text)

        if not rest:
            break
        tokens = rest

    return rows


def wrap_ansi(
    text: str,
    width: int = 80,
    *,
    indent: str = "",
    trim: bool = False,
    hard_wrap: bool = False,
) -> str:
    """Wrap ``text`` so that no line exceeds ``width`` visible columns.

    Args:
        text (str): Text to wrap; may contain escape sequences and newlines.
        width (int): Maximum line width in columns, indent included. A width of
            0 or less returns ``text`` unchanged.
        indent (str): Prefix for every output line after the first one.
        trim (bool): Strip whitespace at the edges of each line.
        hard_wrap (bool): Break exactly at the column limit instead of at the last
            whitespace that fits.

    Returns:
        str: The wrapped text, lines joined with ``"\\n"``. Blank input lines are kept.

    Raises:
        TypeError: If ``text`` is not a string.

    Example:
        ```python
        >>> text = "\\x1b[31mThis is a long text that needs to be wrapped\\x1b[0m"
        >>> wrap_ansi(text, 40, indent="  ")
        '\\x1b[31mThis is a long text that needs to be\\x1b[0m\\n  \\x1b[31mwrapped\\x1b[0m'
        ```
    """
    _require_str(text)
    if text == "" or width <= 0:
        return text

    effective_width = max(width - string_width(indent), 1)
    logger.trace("wrap_ansi: width=%d effective=%d hard=%s", width, effective_width, hard_wrap)

    result: list[str] = []
    for line in text.split("\n"):
        if trim:
            line = trim_ansi(line)
        if line == "":
            result.append("")
            continue
        for row in _wrap_line(line, effective_width, trim=trim, hard_wrap=hard_wrap):
            result.append(indent + row if result else row)

    return "\n".join(result)


def slice_ansi(text: str, start: int, end: int | None = None) -> str:
    """Return the visible columns ``[start, end)`` of ``text``, keeping its styling.

    Styles active at ``start`` are re-opened at the beginning of the slice, and
    styles left open at its end are closed with a reset. A wide character that
    straddles either boundary is left out.

    Args:
        text (str): Text that may contain escape sequences.
        start (int): First column (zero-based).
        end (int | None): Column to stop before; ``None`` slices to the end.

    Returns:
        str: The sliced text.
    """
    _require_str(text)
    state: list[str] = []
    out: list[str] = []
    started = False
    col = 0

    for token in _tokenize(text):
        if token.is_escape:
            _track_style(state, token.text)
            if started:
                out.append(token.text)
            continue

        w = string_width(token.text)
        if end is not None and col + w > end:
            break
        if col >= start:
            if not started:
                out.append("".join(state))
                started = True
            out.append(token.text)
        col += w

    if started and state:
        out.append(RESET)
    return "".join(out)
