# topmark:header:start
#
#   project      : Aconitum
#   file         : temp.py
#   file_relpath : src/aconitum/paths/temp.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Unique paths in the system temporary directory. Nothing is created on disk."""

from __future__ import annotations

import os
import tempfile as _tempfile
import uuid


def temp_directory() -> str:
    """Return the real path of the system temporary directory.

    On macOS the temporary directory is a symlink, resolving it keeps paths comparable.
    """
    return os.path.realpath(_tempfile.gettempdir())


def tempfile(extension: str | None = None) -> str:
    """Return a unique, not yet existing path in the temporary directory.

    Args:
        extension (str | None): File extension; a leading dot is added if missing.

    Returns:
        str: The path.

    Examples:
        >>> tempfile("png")  # doctest: +SKIP
        '/tmp/a5d84e3f-61b0-4d2c-9d52-6c1b8e2c1f0a.png'
    """
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return os.path.join(temp_directory(), f"{uuid.uuid4()}{extension or ''}")
