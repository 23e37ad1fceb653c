# topmark:header:start
#
#   project      : Aconitum
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""CLI test helpers for running Aconitum through Click's test runner.

Commands are invoked with ``--no-color`` unless a test asks otherwise, so the
output can be compared verbatim.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from aconitum.cli.exit_codes import ExitCode
from aconitum.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def _no_project_config(isolation: Path) -> Path:
    """Keep configuration discovery away from the repository's own pyproject.toml."""
    return isolation


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
    color: bool = False,
) -> Result:
    """Invoke the CLI.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["width", "abc"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        color (bool): Keep colors enabled (``--color always``).

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    prefix = ["--color", "always"] if color else ["--no-color"]
    return runner.invoke(cli, [*prefix, *argv], input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output
