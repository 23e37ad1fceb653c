# topmark:header:start
#
#   project      : Aconitum
#   file         : escapes.py
#   file_relpath : src/aconitum/ansi/escapes.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Terminal control sequences: cursor, erase, scroll, screen and iTerm2 extras.

Parameterless sequences are module constants; the rest are small functions
returning the escape string. Nothing is written to the terminal here.

Platform-specific sequences (cursor save/restore on Apple Terminal, the
Windows ``clear_terminal`` variant) are resolved once at import time from
``TERM_PROGRAM`` and ``sys.platform``; the ``*_for`` helpers compute them for an
explicit environment.
"""

from __future__ import annotations

import base64
import os
import sys
from typing import Final

ESC: Final[str] = "\x1b["
OSC: Final[str] = "\x1b]"
BEL: Final[str] = "\x07"
SEP: Final[str] = ";"


def cursor_to(x: int, y: int | None = None) -> str:
    """Move the cursor to column ``x`` (and row ``y`` when given), zero-based."""
    if not isinstance(x, int):
        raise TypeError("The `x` argument is required.")
    if y is None:
        return f"{ESC}{x + 1}G"
    return f"{ESC}{y + 1}{SEP}{x + 1}H"


def cursor_move(x: int, y: int = 0) -> str:
    """Move the cursor relative to its current position."""
    if not isinstance(x, int):
        raise TypeError("The `x` argument is required.")

    result = ""
    if x < 0:
        result += f"{ESC}{-x}D"
    elif x > 0:
        result += f"{ESC}{x}C"

    if y < 0:
        result += f"{ESC}{-y}A"
    elif y > 0:
        result += f"{ESC}{y}B"

    return result


def cursor_up(count: int = 1) -> str:
    return f"{ESC}{count}A"


def cursor_down(count: int = 1) -> str:
    return f"{ESC}{count}B"


def cursor_forward(count: int = 1) -> str:
    return f"{ESC}{count}C"


def cursor_backward(count: int = 1) -> str:
    return f"{ESC}{count}D"


def _is_apple_terminal(term_program: str | None) -> bool:
    return term_program == "Apple_Terminal"


def cursor_save_position_for(term_program: str | None) -> str:
    """Return the save-cursor sequence for the given ``TERM_PROGRAM``."""
    return "\x1b7" if _is_apple_terminal(term_program) else f"{ESC}s"


def cursor_restore_position_for(term_program: str | None) -> str:
    """Return the restore-cursor sequence for the given ``TERM_PROGRAM``."""
    return "\x1b8" if _is_apple_terminal(term_program) else f"{ESC}u"


cursor_left: Final[str] = f"{ESC}G"
cursor_save_position: Final[str] = cursor_save_position_for(os.environ.get("TERM_PROGRAM"))
cursor_restore_position: Final[str] = cursor_restore_position_for(os.environ.get("TERM_PROGRAM"))
cursor_get_position: Final[str] = f"{ESC}6n"
cursor_next_line: Final[str] = f"{ESC}E"
cursor_prev_line: Final[str] = f"{ESC}F"
cursor_hide: Final[str] = f"{ESC}?25l"
cursor_show: Final[str] = f"{ESC}?25h"

erase_end_line: Final[str] = f"{ESC}K"
erase_start_line: Final[str] = f"{ESC}1K"
erase_line: Final[str] = f"{ESC}2K"
erase_down: Final[str] = f"{ESC}J"
erase_up: Final[str] = f"{ESC}1J"
erase_screen: Final[str] = f"{ESC}2J"

scroll_up: Final[str] = f"{ESC}S"
scroll_down: Final[str] = f"{ESC}T"


def erase_lines(count: int) -> str:
    """Erase ``count`` lines upwards from the current one and return to column 1."""
    parts: list[str] = []
    for i in range(count):
        parts.append(erase_line)
        if i < count - 1:
            parts.append(cursor_up())
    if count:
        parts.append(cursor_left)
    return "".join(parts)


def clear_terminal_for(platform: str) -> str:
    """Return the clear-terminal sequence for ``platform`` (a ``sys.platform`` value).

    Outside Windows this erases the screen, the scrollback buffer, and moves the
    cursor home.
    """
    if platform == "win32":
        return f"{erase_screen}{ESC}0f"
    return f"{erase_screen}{ESC}3J{ESC}H"


clear_screen: Final[str] = "\x1bc"
clear_terminal: Final[str] = clear_terminal_for(sys.platform)
clear_viewport: Final[str] = f"{erase_screen}{ESC}H"

enter_alternative_screen: Final[str] = f"{ESC}?1049h"
exit_alternative_screen: Final[str] = f"{ESC}?1049l"

beep: Final[str] = BEL


def link(text: str, url: str) -> str:
    """Return an OSC 8 hyperlink showing ``text`` and pointing at ``url``."""
    return "".join((OSC, "8", SEP, SEP, url, BEL, text, OSC, "8", SEP, SEP, BEL))


def image(
    data: bytes | str,
    *,
    width: int | str | None = None,
    height: int | str | None = None,
    preserve_aspect_ratio: bool = True,
) -> str:
    """Return an iTerm2 inline image sequence.

    Args:
        data (bytes | str): Raw image bytes; strings are encoded as UTF-8.
        width (int | str | None): Width in cells, or a value such as ``"50%"`` / ``"100px"``.
        height (int | str | None): Height in cells, or a value such as ``"50%"`` / ``"100px"``.
        preserve_aspect_ratio (bool): When False, the image is stretched to fit.

    Returns:
        str: The escape sequence with the base64 encoded payload.
    """
    result = f"{OSC}1337;File=inline=1"
    if width:
        result += f";width={width}"
    if height:
        result += f";height={height}"
    if not preserve_aspect_ratio:
        result += ";preserveAspectRatio=0"

    raw = data if isinstance(data, bytes) else str(data).encode("utf-8")
    return result + ":" + base64.b64encode(raw).decode("ascii") + BEL


class ITerm:
    """iTerm2 proprietary sequences."""

    @staticmethod
    def set_cwd(cwd: str | None = None) -> str:
        """Inform iTerm2 of the current directory (defaults to ``os.getcwd()``)."""
        return f"{OSC}50;CurrentDir={cwd if cwd is not None else os.getcwd()}{BEL}"

    @staticmethod
    def annotation(
        message: str,
        *,
        is_hidden: bool = False,
        x: int | None = None,
        y: int | None = None,
        length: int | None = None,
    ) -> str:
        """Attach an annotation to the text at the cursor or at ``(x, y)``.

        Raises:
            ValueError: If ``x`` or ``y`` is given without all of ``x``, ``y`` and ``length``.
        """
        has_x = x is not None
        has_y = y is not None
        if (has_x or has_y) and not (has_x and has_y and length is not None):
            raise ValueError("`x`, `y` and `length` must be defined when `x` or `y` is defined.")

        message = message.replace("|", "", 1)
        result = f"{OSC}1337;"
        result += "AddHiddenAnnotation=" if is_hidden else "AddAnnotation="

        if length and length > 0:
            fields = [message, length, x, y] if has_x else [length, message]
            result += "|".join(str(f) for f in fields)
        else:
            result += message

        return result + BEL


iterm: Final[ITerm] = ITerm()
