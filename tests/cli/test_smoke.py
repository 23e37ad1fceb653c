# topmark:header:start
#
#   project      : Aconitum
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Smoke tests for the CLI group, global options and exit codes."""

from __future__ import annotations

import json

from aconitum.cli.exit_codes import ExitCode
from aconitum.constants import ACONITUM_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import parametrize


def test_group_without_command_prints_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "Usage:" in result.output
    assert "pretty-ms" in result.output


@parametrize(
    "command",
    [
        "version",
        "width",
        "strip",
        "wrap",
        "pretty-ms",
        "parse-duration",
        "parse-url",
        "normalize-url",
        "git-url",
        "signals",
        "config",
    ],
)
def test_every_command_has_help(command: str) -> None:
    result = run_cli([command, "--help"])
    assert_SUCCESS(result)
    assert "Usage:" in result.output


def test_version() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output == f"{ACONITUM_VERSION}\n"


def test_version_json() -> None:
    result = run_cli(["version", "--format", "JSON"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": ACONITUM_VERSION}


def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert "Aconitum version:" in result.output


def test_color_always_styles_output() -> None:
    assert "\x1b[" in run_cli(["version"], color=True).output
    assert "\x1b[" not in run_cli(["version"]).output


def test_verbose_and_quiet_conflict() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)


def test_unknown_format_is_a_click_usage_error() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code == 2
    assert "yaml" in result.output


def test_exit_code_values() -> None:
    """Exit codes follow the BSD sysexits conventions."""
    assert int(ExitCode.SUCCESS) == 0
    assert int(ExitCode.FAILURE) == 1
    assert int(ExitCode.USAGE_ERROR) == 64
    assert int(ExitCode.DATA_ERROR) == 65
