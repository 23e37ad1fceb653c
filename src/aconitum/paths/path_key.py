# topmark:header:start
#
#   project      : Aconitum
#   file         : path_key.py
#   file_relpath : src/aconitum/paths/path_key.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Name of the ``PATH`` environment variable, which is case-insensitive on Windows."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping


def path_key(env: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Return the key under which ``env`` stores the executable search path.

    Args:
        env (Mapping[str, str] | None): Environment to inspect, ``os.environ`` by default.
        platform (str | None): Platform name, ``sys.platform`` by default.

    Returns:
        str: ``PATH`` outside Windows. On Windows, the last key of ``env`` that
            matches ``PATH`` case-insensitively, or ``Path``.
    """
    env = os.environ if env is None else env
    platform = sys.platform if platform is None else platform

    if platform != "win32":
        return "PATH"
    return next((key for key in reversed(list(env)) if key.upper() == "PATH"), "Path")
