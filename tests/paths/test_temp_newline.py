# topmark:header:start
#
#   project      : Aconitum
#   file         : test_temp_newline.py
#   file_relpath : tests/paths/test_temp_newline.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for temporary path names and final newline stripping."""

from __future__ import annotations

import os
from typing import Any

import pytest

from aconitum.paths.newline import strip_final_newline
from aconitum.paths.temp import temp_directory, tempfile
from tests.conftest import parametrize


def test_tempfile_is_unique_and_not_created() -> None:
    first, second = tempfile(), tempfile()
    assert first != second
    assert os.path.dirname(first) == temp_directory()
    assert not os.path.exists(first)


@parametrize("extension", ["png", ".png"])
def test_tempfile_extension(extension: str) -> None:
    path = tempfile(extension)
    assert path.endswith(".png")
    assert not path.endswith("..png")


def test_temp_directory_is_resolved() -> None:
    assert temp_directory() == os.path.realpath(temp_directory())


@parametrize(
    "value, expected",
    [
        ("foo\nbar\n\n", "foo\nbar\n"),
        ("foo\r\n", "foo"),
        ("foo", "foo"),
        ("", ""),
        (b"foo\r\n", b"foo"),
        (b"foo\n", b"foo"),
    ],
)
def test_strip_final_newline(value: Any, expected: Any) -> None:
    assert strip_final_newline(value) == expected


def test_strip_final_newline_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        strip_final_newline(1)  # type: ignore[type-var]
