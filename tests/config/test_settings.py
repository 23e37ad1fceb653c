# topmark:header:start
#
#   project      : Aconitum
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for settings discovery, validation and TOML export."""

from __future__ import annotations

import logging
import textwrap
from typing import TYPE_CHECKING

import pytest
import tomlkit

from aconitum.config.settings import (
    Settings,
    discover_config,
    load_defaults_dict,
    load_settings,
    load_toml_dict,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, content: str) -> None:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")


def test_defaults_without_config(isolation: Path) -> None:
    settings = load_settings()
    assert settings == Settings()
    assert settings.source is None
    assert settings.to_toml_dict() == load_defaults_dict()


def test_defaults_dict_is_a_fresh_copy() -> None:
    first = load_defaults_dict()
    first["wrap"]["width"] = 1
    assert load_defaults_dict()["wrap"]["width"] == 80


def test_discovers_aconitum_toml_in_a_parent(isolation: Path) -> None:
    _write(
        isolation / "aconitum.toml",
        """
        [wrap]
        width = 40
        hard_wrap = true
        """,
    )
    nested = isolation / "a" / "b"
    nested.mkdir(parents=True)

    settings = load_settings(start=nested)
    assert settings.source == isolation / "aconitum.toml"
    assert settings.wrap.width == 40
    assert settings.wrap.hard_wrap is True
    assert settings.wrap.trim is False


def test_reads_tool_table_from_pyproject(isolation: Path) -> None:
    _write(
        isolation / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.aconitum.time]
        seconds_decimal_digits = 3
        """,
    )
    source, table = discover_config()
    assert source == isolation / "pyproject.toml"
    assert table == {"time": {"seconds_decimal_digits": 3}}
    assert load_settings().time.seconds_decimal_digits == 3


def test_pyproject_without_tool_table_is_skipped(isolation: Path) -> None:
    _write(isolation / "pyproject.toml", '[project]\nname = "demo"\n')
    assert discover_config() == (None, {})


def test_aconitum_toml_wins_over_pyproject(isolation: Path) -> None:
    _write(isolation / "pyproject.toml", "[tool.aconitum.wrap]\nwidth = 10\n")
    _write(isolation / "aconitum.toml", "[wrap]\nwidth = 20\n")
    assert load_settings().wrap.width == 20


def test_explicit_config_file(isolation: Path) -> None:
    _write(isolation / "aconitum.toml", "[wrap]\nwidth = 20\n")
    explicit = isolation / "other" / "pyproject.toml"
    _write(explicit, "[tool.aconitum.urls]\ndefault_protocol = \"https\"\n")

    settings = load_settings(config_file=explicit)
    assert settings.source == explicit
    assert settings.urls.default_protocol == "https"
    assert settings.wrap.width == 80


def test_wrong_types_fall_back_to_defaults(
    isolation: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    settings = Settings.from_mapping(
        {
            "wrap": {"width": "wide", "trim": 1},
            "width": {"ambiguous_is_narrow": 0},
            "time": [],
            "colors": {},
        }
    )
    assert settings.wrap.width == 80
    assert settings.wrap.trim is False
    assert settings.width.ambiguous_is_narrow is True
    assert settings.time.seconds_decimal_digits == 1
    assert "Ignoring width = 'wide'" in caplog.text
    assert "Ignoring [time]" in caplog.text
    assert "unknown config section [colors]" in caplog.text


def test_booleans_are_not_integers() -> None:
    settings = Settings.from_mapping({"wrap": {"width": True}})
    assert settings.wrap.width == 80


def test_invalid_toml_is_ignored(isolation: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    _write(isolation / "aconitum.toml", "[wrap\nwidth = \n")
    assert load_toml_dict(isolation / "aconitum.toml") == {}
    assert "Error decoding TOML" in caplog.text
    assert load_settings() == Settings(source=isolation / "aconitum.toml")


def test_missing_file_is_ignored(isolation: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    assert load_toml_dict(isolation / "missing.toml") == {}
    assert "Error loading TOML" in caplog.text


def test_to_toml_round_trips() -> None:
    table = load_defaults_dict()
    assert tomlkit.parse(to_toml(table)).unwrap() == table


def test_to_toml_for_pyproject() -> None:
    doc = tomlkit.parse(to_toml(load_defaults_dict(), for_pyproject=True)).unwrap()
    assert doc["tool"]["aconitum"]["wrap"]["width"] == 80
