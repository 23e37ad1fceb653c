# topmark:header:start
#
#   project      : Aconitum
#   file         : is_ssh.py
#   file_relpath : src/aconitum/urls/is_ssh.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Detect SSH remotes, including scp-like ``user@host:path`` forms."""

from __future__ import annotations

import re
from typing import Final

from aconitum.urls.protocols import protocols

SSH_PROTOCOLS: Final[frozenset[str]] = frozenset({"ssh", "rsync"})

# ``host.tld:8080/`` is a port, not an scp-like path separator
_URL_PORT_RE: Final[re.Pattern[str]] = re.compile(r"\.([a-zA-Z\d]+):(\d+)/?")


def is_ssh(value: str | list[str]) -> bool:
    """Return whether ``value`` designates an SSH URL.

    Args:
        value (str | list[str]): Either a list of protocols or a URL string.

    Returns:
        bool: True for ``ssh``/``rsync`` protocols and for ``user@host:path`` remotes.

    Examples:
        >>> is_ssh(["ssh", "git"])
        True
        >>> is_ssh("user@example.com:path/to/repo.git")
        True
        >>> is_ssh("https://example.com/repo.git")
        False
    """
    if isinstance(value, list):
        return not SSH_PROTOCOLS.isdisjoint(value)
    if not isinstance(value, str):
        return False

    prots = protocols(value)
    if isinstance(prots, list) and is_ssh(prots):
        return True

    _, sep, rest = value.partition("://")
    if not sep:
        rest = value

    if _URL_PORT_RE.search(rest):
        return False
    at, colon = rest.find("@"), rest.find(":")
    return 0 <= at < colon
