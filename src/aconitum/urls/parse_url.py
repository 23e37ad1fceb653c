# topmark:header:start
#
#   project      : Aconitum
#   file         : parse_url.py
#   file_relpath : src/aconitum/urls/parse_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Parse URLs, including scp-like git remotes such as ``git@github.com:user/repo.git``."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from aconitum.config.logging import get_logger
from aconitum.constants import MAX_URL_INPUT_LENGTH
from aconitum.urls.errors import UrlParseError
from aconitum.urls.normalize_url import NormalizeOptions, normalize_url
from aconitum.urls.parse_path import ParsedPath, parse_path

logger = get_logger(__name__)

GIT_REPOSITORY_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?:([a-zA-Z_][a-zA-Z0-9_-]{0,31})@|https?://)([\w.\-@]+)[/:]"
    r"(([~.\w\-_/,\s]|%[0-9A-Fa-f]{2})+?(?:\.git|/)?)$"
)


def _is_scp_like(url: str) -> bool:
    return "://" not in url and GIT_REPOSITORY_RE.match(url.strip()) is not None


def parse_url(
    url: str,
    normalize: bool | NormalizeOptions | Mapping[str, object] = False,
    *,
    max_input_length: int = MAX_URL_INPUT_LENGTH,
) -> ParsedPath:
    """Parse ``url`` into its components.

    Args:
        url (str): An HTTP(S), SSH or scp-like URL.
        normalize (bool | NormalizeOptions | Mapping[str, object]): Normalize the
            URL first. True normalizes with default options but keeps the hash.
            Normalization does not apply to scp-like remotes.
        max_input_length (int): Longest accepted input.

    Returns:
        ParsedPath: The parsed components.

    Raises:
        UrlParseError: If ``url`` is empty, too long or cannot be parsed.

    Examples:
        >>> p = parse_url("git@github.com:username/repo.git")
        >>> (p.protocol, p.user, p.resource, p.pathname)
        ('ssh', 'git', 'github.com', '/username/repo.git')
    """
    if not isinstance(url, str) or not url.strip():
        raise UrlParseError("Invalid URL.", url)

    if len(url) > max_input_length:
        raise UrlParseError(
            "Input exceeds maximum length. If needed, change the value of "
            f"max_input_length (currently {max_input_length}).",
            url,
        )

    if normalize and not _is_scp_like(url):
        if normalize is True:
            normalize = NormalizeOptions(strip_hash=False)
        url = normalize_url(url, normalize)  # type: ignore[arg-type]

    parsed = parse_path(url)
    if not parsed.parse_failed:
        return parsed

    m = GIT_REPOSITORY_RE.match(parsed.href)
    if m is None:
        raise UrlParseError("URL parsing failed.", url)

    logger.trace("parsed %r as an scp-like SSH remote", url)
    parsed.protocols = ["ssh"]
    parsed.protocol = "ssh"
    parsed.resource = m.group(2)
    parsed.host = m.group(2)
    parsed.user = m.group(1) or ""
    parsed.pathname = f"/{m.group(3)}"
    parsed.parse_failed = False
    return parsed
