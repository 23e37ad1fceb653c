# topmark:header:start
#
#   project      : Aconitum
#   file         : protocols.py
#   file_relpath : src/aconitum/urls/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Extract the protocol chain of a URL (``git+https`` gives ``["git", "https"]``)."""

from __future__ import annotations

import re
from typing import Final

from aconitum.urls.errors import UrlParseError
from aconitum.urls.structure import UrlParts, split_url

_PROTOCOL_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"[:+]")


def split_scheme(scheme: str) -> list[str]:
    """Split a scheme such as ``git+ssh`` into its protocols."""
    return [p for p in _PROTOCOL_SPLIT_RE.split(scheme) if p]


def protocols(
    url: str | UrlParts,
    first: bool = False,
    *,
    index: int | None = None,
) -> str | list[str] | None:
    """Return the protocols of ``url``.

    Args:
        url (str | UrlParts): The URL, as a string or already split.
        first (bool): Return only the first protocol.
        index (int | None): Return only the protocol at this position.

    Returns:
        str | list[str] | None: All protocols, or the selected one. Input that is
            not an absolute URL has no protocols; selecting a missing position
            gives ``None``.

    Examples:
        >>> protocols("git+https://github.com/user/repo")
        ['git', 'https']
        >>> protocols("git+https://github.com/user/repo", True)
        'git'
        >>> protocols("git+https://github.com/user/repo", index=1)
        'https'
    """
    if isinstance(url, UrlParts):
        scheme = url.scheme
    else:
        try:
            scheme = split_url(url).scheme
        except UrlParseError:
            scheme = ""

    splits = split_scheme(scheme)

    if first:
        index = 0
    if index is None:
        return splits
    return splits[index] if -len(splits) <= index < len(splits) else None
