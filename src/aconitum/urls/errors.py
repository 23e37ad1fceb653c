# topmark:header:start
#
#   project      : Aconitum
#   file         : errors.py
#   file_relpath : src/aconitum/urls/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Exceptions raised by the URL helpers.

Both derive from ``ValueError`` so callers can catch malformed input generically.
"""

from __future__ import annotations


class UrlParseError(ValueError):
    """A URL could not be parsed.

    Attributes:
        subject_url (object): The input that failed to parse.
    """

    def __init__(self, message: str, subject_url: object) -> None:
        super().__init__(message)
        self.subject_url = subject_url


class UrlOptionsError(ValueError):
    """Mutually exclusive normalization options were combined."""
