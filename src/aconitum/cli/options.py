# topmark:header:start
#
#   project      : Aconitum
#   file         : options.py
#   file_relpath : src/aconitum/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from aconitum.cli.cli_types import EnumChoiceParam
from aconitum.cli.errors import AconitumUsageError
from aconitum.config.logging import TRACE_LEVEL
from aconitum.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for ``-v``, ERROR for
            ``-q`` and WARNING otherwise.

    Raises:
        AconitumUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise AconitumUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(KeyedStrEnum):
    """User intent for colorized terminal output."""

    AUTO = ("auto", "Auto", ("tty",))
    ALWAYS = ("always", "Always", ("force", "on"))
    NEVER = ("never", "Never", ("off", "none"))


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Explicit ``--color`` modes win, then ``FORCE_COLOR`` and ``NO_COLOR``, then
    whether stdout is a terminal.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


class OutputFormat(KeyedStrEnum):
    """Output format for command results.

    Members:
      DEFAULT: Human-friendly text output.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = ("default", "Text", ("text", "plain"))
    JSON = ("json", "JSON")


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option taking an `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.DEFAULT.key,
        show_default=True,
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)
