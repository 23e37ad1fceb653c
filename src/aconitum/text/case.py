# topmark:header:start
#
#   project      : Aconitum
#   file         : case.py
#   file_relpath : src/aconitum/text/case.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Small string helpers: case conversion, regex escaping, string coercion and deep lookup."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any, Final

from aconitum.text.graphemes import iter_graphemes

_REGEXP_CHAR: Final[re.Pattern[str]] = re.compile(r"[\\^$.*+?()\[\]{}|]")

_IS_DEEP_PROP: Final[re.Pattern[str]] = re.compile(
    r"""\.|\[(?:[^\[\]]*|(["'])(?:(?!\1)[^\n\\]|\\.)*?\1)\]"""
)
_IS_PLAIN_PROP: Final[re.Pattern[str]] = re.compile(r"^\w*$")
_PROP_NAME: Final[re.Pattern[str]] = re.compile(
    r"""[^.\[\]]+"""
    r"""|\[(?:(-?\d+(?:\.\d+)?)|(["'])((?:(?!\2)[^\n\\]|\\.)*?)\2)\]"""
    r"""|(?=(?:\.|\[\])(?:\.|\[\]|$))"""
)
_ESCAPE_CHAR: Final[re.Pattern[str]] = re.compile(r"\\(\\)?")


def to_string(value: Any) -> str:
    """Convert ``value`` to a string.

    ``None`` becomes ``""``, negative zero keeps its sign (``"-0"``) and sequences
    are joined with commas, element by element.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(to_string(v) for v in value)
    if isinstance(value, float) and value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    return str(value)


def upper_first(text: str = "") -> str:
    """Uppercase the first user-perceived character of ``text``."""
    text = to_string(text)
    for first in iter_graphemes(text):
        return first.upper() + text[len(first) :]
    return text


def capitalize(text: str = "") -> str:
    """Uppercase the first character of ``text`` and lowercase the rest."""
    return upper_first(to_string(text).lower())


def escape_regexp(text: str = "") -> str:
    r"""Escape the regex syntax characters ``\ ^ $ . * + ? ( ) [ ] { } |`` in ``text``."""
    text = to_string(text)
    return _REGEXP_CHAR.sub(lambda m: "\\" + m.group(0), text)


def _is_key(path: Any, obj: Any) -> bool:
    if isinstance(path, (int, float, bool)) or path is None:
        return True
    text = to_string(path)
    if _IS_PLAIN_PROP.match(text) or not _IS_DEEP_PROP.search(text):
        return True
    return isinstance(obj, Mapping) and text in obj


def _string_to_path(text: str) -> list[str]:
    result: list[str] = []
    for m in _PROP_NAME.finditer(text):
        number, quote, sub_string = m.group(1), m.group(2), m.group(3)
        if quote:
            result.append(_ESCAPE_CHAR.sub(lambda e: e.group(1) or "", sub_string))
        else:
            result.append(number or m.group(0))
    return result


_MISSING: Final[object] = object()


def _step(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        if key in obj:
            return obj[key]
        return obj.get(str(key), _MISSING)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        try:
            return obj[int(key)]
        except (ValueError, IndexError):
            return _MISSING
    if isinstance(key, str) and key.isidentifier():
        return getattr(obj, key, _MISSING)
    return _MISSING


def get(obj: Any, path: str | Sequence[Any], default: Any = None) -> Any:
    """Resolve ``path`` inside ``obj``, returning ``default`` when it cannot be resolved.

    Args:
        obj (Any): Root object: mappings, sequences and plain objects are traversed.
        path (str | Sequence[Any]): A property path such as ``"a[0].b.c"`` or
            ``'a["key.with.dots"]'``, or an explicit list of keys.
        default (Any): Value returned when the path is missing or resolves to ``None``.

    Returns:
        Any: The resolved value or ``default``.

    Example:
        ```python
        >>> get({"a": [{"b": {"c": 3}}]}, "a[0].b.c")
        3
        >>> get({"a": 1}, ["a", "b"], "fallback")
        'fallback'
        ```
    """
    if obj is None:
        return default

    keys: list[Any]
    if isinstance(path, (list, tuple)):
        keys = list(path)
    elif _is_key(path, obj):
        keys = [path if isinstance(obj, Mapping) and path in obj else to_string(path)]
    else:
        keys = _string_to_path(to_string(path))

    current: Any = obj
    for key in keys:
        if current is None:
            return default
        current = _step(current, key)
        if current is _MISSING:
            return default

    if not keys or current is None:
        return default
    return current
