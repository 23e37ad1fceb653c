# topmark:header:start
#
#   project      : Aconitum
#   file         : test_is_ssh.py
#   file_relpath : tests/urls/test_is_ssh.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for `is_ssh`."""

from __future__ import annotations

from aconitum.urls.is_ssh import is_ssh
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        (["ssh", "git"], True),
        (["rsync"], True),
        (["https"], False),
        ([], False),
        ("ssh://git@github.com/owner/repo.git", True),
        ("git+ssh://git@github.com/owner/repo.git", True),
        ("rsync://example.com/module", True),
        ("git@github.com:owner/repo.git", True),
        ("https://github.com/owner/repo.git", False),
        ("git@example.com:8080/path", False),
        ("owner/repo", False),
    ],
)
def test_is_ssh(value: str | list[str], expected: bool) -> None:
    assert is_ssh(value) is expected
