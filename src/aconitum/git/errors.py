# topmark:header:start
#
#   project      : Aconitum
#   file         : errors.py
#   file_relpath : src/aconitum/git/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Exceptions raised by the git URL and GitHub helpers."""

from __future__ import annotations


class GitUrlError(ValueError):
    """A git URL could not be parsed or built."""


class GitHubRateLimitError(RuntimeError):
    """The GitHub API refused a request because the rate limit is used up.

    Attributes:
        limit (int): Requests allowed per window.
        reset_at (int): Epoch seconds at which the window resets.
    """

    limit: int
    reset_at: int

    def __init__(self, message: str, *, limit: int, reset_at: int) -> None:
        super().__init__(message)
        self.limit = limit
        self.reset_at = reset_at
