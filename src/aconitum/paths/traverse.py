# topmark:header:start
#
#   project      : Aconitum
#   file         : traverse.py
#   file_relpath : src/aconitum/paths/traverse.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Path conversion and upward directory traversal.

All helpers accept ``str``, ``os.PathLike`` or ``file://`` URL strings.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

PathInput = str | os.PathLike[str]


def to_path(url_or_path: PathInput) -> str:
    """Return ``url_or_path`` as a filesystem path string.

    Args:
        url_or_path (PathInput): A path, or a ``file://`` URL.

    Returns:
        str: The filesystem path.

    Raises:
        ValueError: If a ``file://`` URL names a remote host.

    Examples:
        >>> to_path("file:///tmp/some%20dir")
        '/tmp/some dir'
    """
    text = os.fspath(url_or_path)
    if not text.lower().startswith("file:"):
        return text

    parts = urlsplit(text)
    if parts.netloc not in ("", "localhost"):
        raise ValueError(f"File URL host must be empty or localhost: {text}")
    return url2pathname(parts.path)


def root_directory(path: PathInput) -> str:
    """Return the filesystem root (anchor) of ``path``, e.g. ``/`` or ``C:\\``."""
    return Path(to_path(path)).anchor


def traverse_path_up(start: PathInput) -> Iterator[str]:
    """Yield ``start`` as an absolute path, then each of its parents up to the root.

    Examples:
        >>> list(traverse_path_up("/a/b"))
        ['/a/b', '/a', '/']
    """
    current = Path(os.path.abspath(to_path(start)))
    yield str(current)
    for parent in current.parents:
        yield str(parent)
