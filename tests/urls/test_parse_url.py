# topmark:header:start
#
#   project      : Aconitum
#   file         : test_parse_url.py
#   file_relpath : tests/urls/test_parse_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for `parse_url`, including scp-like git remotes."""

from __future__ import annotations

import pytest

from aconitum.urls.errors import UrlParseError
from aconitum.urls.parse_url import parse_url
from tests.conftest import parametrize


def test_parse_scp_like_remote() -> None:
    p = parse_url("git@github.com:username/repo.git")
    assert p.protocols == ["ssh"]
    assert p.protocol == "ssh"
    assert p.user == "git"
    assert p.resource == "github.com"
    assert p.host == "github.com"
    assert p.pathname == "/username/repo.git"
    assert p.parse_failed is False


def test_parse_https_url() -> None:
    p = parse_url("https://github.com/owner/repo.git")
    assert p.protocol == "https"
    assert p.resource == "github.com"
    assert p.pathname == "/owner/repo.git"


def test_parse_with_normalization_keeps_hash() -> None:
    p = parse_url("https://www.example.com/path/?b=1&a=2#frag", normalize=True)
    assert p.resource == "example.com"
    assert p.pathname == "/path"
    assert p.search == "a=2&b=1"
    assert p.hash == "frag"


def test_parse_with_normalize_options() -> None:
    p = parse_url("https://example.com/path#frag", normalize={"strip_hash": True})
    assert p.hash == ""


def test_normalization_skips_scp_like_remotes() -> None:
    p = parse_url("git@github.com:username/repo.git", normalize=True)
    assert p.pathname == "/username/repo.git"


@parametrize("url", ["", "   ", "not a url::"])
def test_parse_rejects_invalid_input(url: str) -> None:
    with pytest.raises(UrlParseError):
        parse_url(url)


def test_parse_enforces_the_input_limit() -> None:
    url = "https://example.com/" + "a" * 40
    with pytest.raises(UrlParseError) as excinfo:
        parse_url(url, max_input_length=30)
    assert str(excinfo.value) == (
        "Input exceeds maximum length. If needed, change the value of "
        "max_input_length (currently 30)."
    )
    assert excinfo.value.subject_url == url
    assert parse_url(url, max_input_length=100).resource == "example.com"
