# topmark:header:start
#
#   project      : Aconitum
#   file         : github_releases.py
#   file_relpath : src/aconitum/git/github_releases.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Fetch the tags of a GitHub repository through the REST API.

Authentication is a personal access token (sent as ``Bearer``) or, failing
that, a user and password pair (HTTP basic auth). Anonymous requests work too,
within GitHub's lower rate limit.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Final

import httpx

from aconitum.config.logging import get_logger
from aconitum.git.errors import GitHubRateLimitError
from aconitum.time.pretty_ms import pretty_ms

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

GITHUB_API_URL: Final[str] = "https://api.github.com"
USER_AGENT: Final[str] = "aconitum_github-lookup"
DEFAULT_TIMEOUT: Final[float] = 10.0


def releases_url(repo: str) -> str:
    """Return the tags endpoint for ``repo`` (``owner/project``)."""
    return f"{GITHUB_API_URL}/repos/{repo}/tags"


def _auth_for(
    token: str | None, user: str | None, password: str | None
) -> tuple[dict[str, str], httpx.BasicAuth | None]:
    headers = {"User-Agent": USER_AGENT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
        return headers, None
    if user and password:
        return headers, httpx.BasicAuth(user, password)
    return headers, None


def _header_int(response: httpx.Response, name: str) -> int | None:
    raw = response.headers.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def time_to_reset(reset_at: int, now: float | None = None) -> str:
    """Describe the wait until ``reset_at`` (epoch seconds), e.g. ``1 minute 30 seconds``.

    The wait is counted in whole seconds and never goes below zero.
    """
    current = time.time() if now is None else now
    seconds = max(0, int(reset_at - current))
    return pretty_ms(seconds * 1000, verbose=True, seconds_decimal_digits=0)


def _fetch(
    client: httpx.Client,
    url: str,
    headers: dict[str, str],
    auth: httpx.BasicAuth | None,
) -> list[dict[str, Any]]:
    # Without credentials of our own, leave any auth configured on the client alone.
    response = client.get(
        url, headers=headers, auth=httpx.USE_CLIENT_DEFAULT if auth is None else auth
    )
    _check_rate_limit(response)
    response.raise_for_status()
    return response.json()


def _check_rate_limit(response: httpx.Response) -> None:
    remaining = _header_int(response, "x-ratelimit-remaining")
    if remaining != 0:
        return
    limit = _header_int(response, "x-ratelimit-limit") or 0
    reset_at = _header_int(response, "x-ratelimit-reset") or 0
    raise GitHubRateLimitError(
        f"ratelimit of {limit} requests exceeded, resets in {time_to_reset(reset_at)}",
        limit=limit,
        reset_at=reset_at,
    )


def github_releases(
    repo: str,
    *,
    token: str | None = None,
    user: str | None = None,
    password: str | None = None,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[dict[str, Any]]:
    """Return the tags of ``repo`` as decoded by the GitHub API.

    Args:
        repo (str): Repository as ``owner/project``.
        token (str | None): Personal access token; takes precedence over basic auth.
        user (str | None): User name for basic auth.
        password (str | None): Password for basic auth, used only with ``user``.
        client (httpx.Client | None): Client to send the request with. A
            short-lived client is created when None.
        timeout (float): Request timeout in seconds for the created client.

    Returns:
        list[dict[str, Any]]: One object per tag (``name``, ``commit``, ...).

    Raises:
        ValueError: If ``repo`` is empty.
        GitHubRateLimitError: If the response reports no remaining requests.
        httpx.HTTPStatusError: For any other error status.
        httpx.RequestError: If the request could not be sent.
    """
    if not repo:
        raise ValueError("github repo required")

    url = releases_url(repo)
    headers, auth = _auth_for(token, user, password)
    logger.debug("Fetching tags for %s", repo)

    if client is None:
        with httpx.Client(timeout=timeout) as own_client:
            return _fetch(own_client, url, headers, auth)
    return _fetch(client, url, headers, auth)
