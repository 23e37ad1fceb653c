# topmark:header:start
#
#   project      : Aconitum
#   file         : newline.py
#   file_relpath : src/aconitum/paths/newline.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Drop the final newline of command output."""

from __future__ import annotations

from typing import AnyStr


def strip_final_newline(value: AnyStr) -> AnyStr:
    """Remove one trailing ``\\n`` or ``\\r\\n`` from ``value``.

    Raises:
        TypeError: If ``value`` is neither ``str`` nor ``bytes``.

    Examples:
        >>> strip_final_newline("foo\\nbar\\n\\n")
        'foo\\nbar\\n'
        >>> strip_final_newline(b"foo\\r\\n")
        b'foo'
    """
    if isinstance(value, str):
        if value.endswith("\r\n"):
            return value[:-2]
        return value[:-1] if value.endswith("\n") else value
    if isinstance(value, (bytes, bytearray)):
        if value.endswith(b"\r\n"):
            return value[:-2]
        return value[:-1] if value.endswith(b"\n") else value
    raise TypeError(f"Expected `str` or `bytes`, got `{type(value).__name__}`")
