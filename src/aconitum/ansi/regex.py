# topmark:header:start
#
#   project      : Aconitum
#   file         : regex.py
#   file_relpath : src/aconitum/ansi/regex.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Regular expression matching ANSI escape sequences.

The pattern matches:
    - CSI sequences introduced by ``ESC [`` or the C1 byte ``\\x9b``, including SGR
      styling, cursor movement and erase commands.
    - OSC strings (e.g. hyperlinks, window titles) terminated by BEL, ``ESC \\``
      or ``\\x9c``.

Example:
    ```python
    >>> ansi_regex().findall("\\x1b[4mcake\\x1b[0m")
    ['\\x1b[4m', '\\x1b[0m']
    ```
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

# Valid string terminators: BEL, ESC\ and 0x9c
_ST: Final[str] = r"(?:\x07|\x1b\\|\x9c)"

_OSC_LIKE: Final[str] = (
    r"(?:(?:(?:;[-a-zA-Z0-9/#&.:=?%@~_]+)*"
    r"|[a-zA-Z0-9]+(?:;[-a-zA-Z0-9/#&.:=?%@~_]*)*)?" + _ST + r")"
)

_CSI_LIKE: Final[str] = r"(?:(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-PR-TZcf-nq-uy=><~])"

ANSI_PATTERN: Final[str] = r"[\x1b\x9b][\[\]()#;?]*(?:" + _OSC_LIKE + "|" + _CSI_LIKE + ")"


@lru_cache(maxsize=None)
def _compiled() -> re.Pattern[str]:
    return re.compile(ANSI_PATTERN)


def ansi_regex(only_first: bool = False) -> re.Pattern[str]:
    """Return the compiled pattern matching ANSI escape sequences.

    Args:
        only_first (bool): Kept for callers that only want the first match.
            Python patterns carry no global flag, so use ``search()`` for a single
            match and ``finditer()``/``sub()`` for all of them; the same pattern
            serves both.

    Returns:
        re.Pattern[str]: The compiled (and cached) pattern.
    """
    del only_first
    return _compiled()
