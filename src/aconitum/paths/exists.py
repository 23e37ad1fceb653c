# topmark:header:start
#
#   project      : Aconitum
#   file         : exists.py
#   file_relpath : src/aconitum/paths/exists.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Check whether a path exists, synchronously or from a coroutine."""

from __future__ import annotations

import asyncio
import os

from aconitum.paths.traverse import PathInput, to_path


def path_exists(path: PathInput) -> bool:
    """Return whether ``path`` exists. Broken symlinks and unreadable paths do not."""
    return os.path.exists(to_path(path))


async def path_exists_async(path: PathInput) -> bool:
    """Coroutine variant of [`path_exists`][aconitum.paths.exists.path_exists].

    The ``stat`` call runs in the default executor.
    """
    return await asyncio.to_thread(path_exists, path)
