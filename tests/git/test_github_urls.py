# topmark:header:start
#
#   project      : Aconitum
#   file         : test_github_urls.py
#   file_relpath : tests/git/test_github_urls.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for the GitHub issue and release URL builders."""

from __future__ import annotations

import pytest

from aconitum.git.errors import GitUrlError
from aconitum.git.github_urls import new_github_issue_url, new_github_release_url


def test_issue_url_from_user_and_repo() -> None:
    url = new_github_issue_url(user="sindresorhus", repo="new-github-issue-url", title="Bug")
    assert url == "https://github.com/sindresorhus/new-github-issue-url/issues/new?title=Bug"


def test_issue_url_encodes_parameters() -> None:
    url = new_github_issue_url(
        repo_url="https://github.com/owner/repo/",
        labels=["bug", "help wanted"],
        body="Steps & more",
        milestone=3,
    )
    assert url == (
        "https://github.com/owner/repo/issues/new"
        "?labels=bug%2Chelp+wanted&body=Steps+%26+more&milestone=3"
    )


def test_issue_url_without_parameters() -> None:
    assert new_github_issue_url(repo_url="https://github.com/owner/repo") == (
        "https://github.com/owner/repo/issues/new"
    )


def test_release_url() -> None:
    url = new_github_release_url(user="sindresorhus", repo="np", tag="v1.0.0", is_prerelease=True)
    assert url == "https://github.com/sindresorhus/np/releases/new?tag=v1.0.0&prerelease=true"


def test_release_url_false_prerelease() -> None:
    url = new_github_release_url(repo_url="https://github.com/o/r", is_prerelease=False)
    assert url == "https://github.com/o/r/releases/new?prerelease=false"


def test_repository_is_required() -> None:
    with pytest.raises(GitUrlError, match="repo_url"):
        new_github_issue_url(user="only-user")
    with pytest.raises(GitUrlError):
        new_github_release_url()
