# topmark:header:start
#
#   project      : Aconitum
#   file         : strip.py
#   file_relpath : src/aconitum/ansi/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Remove ANSI escape sequences from a string."""

from __future__ import annotations

from aconitum.ansi.regex import ansi_regex


def strip_ansi(text: str) -> str:
    """Return ``text`` with every ANSI escape sequence removed.

    Args:
        text (str): Text that may contain escape sequences.

    Returns:
        str: The visible text only.

    Raises:
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a `string`, got `{type(text).__name__}`")
    return ansi_regex().sub("", text)
