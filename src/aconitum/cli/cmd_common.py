# topmark:header:start
#
#   project      : Aconitum
#   file         : cmd_common.py
#   file_relpath : src/aconitum/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Helpers shared by the Aconitum subcommands.

Commands read the console, the effective settings and the output verbosity
from ``ctx.obj`` (populated by the group callback in `aconitum.cli.main`). The
helpers fall back to sensible values so a command also works when invoked
directly, e.g. in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aconitum.cli.console import ClickConsole
from aconitum.cli.errors import AconitumUsageError
from aconitum.config.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence


def get_console(ctx: click.Context) -> ClickConsole:
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_settings(ctx: click.Context) -> Settings:
    ctx.ensure_object(dict)
    settings: Settings | None = ctx.obj.get("settings")
    return settings if settings is not None else Settings()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity: the ``-v`` count, negative for ``-q``."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def read_stdin_text() -> str | None:
    """Return piped STDIN content, or None if STDIN is a terminal or empty."""
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return None
    data = stream.read()
    return data or None


def texts_or_stdin(texts: Sequence[str], *, split_lines: bool) -> list[str]:
    """Return the positional arguments, or STDIN content when there are none.

    Args:
        texts (Sequence[str]): Positional TEXT arguments.
        split_lines (bool): Treat every STDIN line as a separate input.

    Returns:
        list[str]: The inputs to process.

    Raises:
        AconitumUsageError: If there are no arguments and nothing was piped.
    """
    if texts:
        return list(texts)
    data = read_stdin_text()
    if data is None:
        raise AconitumUsageError("No input: pass TEXT arguments or pipe text on STDIN.")
    return data.splitlines() if split_lines else [data]
