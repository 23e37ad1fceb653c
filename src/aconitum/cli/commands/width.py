# topmark:header:start
#
#   project      : Aconitum
#   file         : width.py
#   file_relpath : src/aconitum/cli/commands/width.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `width` command.

Prints the display width, in terminal columns, of each TEXT argument. Without
arguments every line read from STDIN is measured.
"""

from __future__ import annotations

import click

from aconitum.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_settings,
    texts_or_stdin,
)
from aconitum.text.width import string_width


@click.command(
    name="width",
    help="Print the display width of each TEXT (or of each STDIN line).",
)
@click.argument("texts", nargs=-1, metavar="[TEXT]...")
@click.option(
    "--ambiguous-wide/--ambiguous-narrow",
    "ambiguous_wide",
    default=None,
    help="Count East Asian Ambiguous characters as wide. Defaults to [width] settings.",
)
@click.option(
    "--count-ansi/--ignore-ansi",
    default=None,
    help="Measure ANSI escape sequences as text instead of ignoring them.",
)
@click.pass_context
def width_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    *,
    ambiguous_wide: bool | None,
    count_ansi: bool | None,
) -> None:
    """Print one width per input."""
    console = get_console(ctx)
    settings = get_settings(ctx).width

    ambiguous_is_narrow = (
        settings.ambiguous_is_narrow if ambiguous_wide is None else not ambiguous_wide
    )
    count_ansi_escape_codes = (
        settings.count_ansi_escape_codes if count_ansi is None else count_ansi
    )
    verbose = get_effective_verbosity(ctx) > 0

    for text in texts_or_stdin(texts, split_lines=True):
        width = string_width(
            text,
            ambiguous_is_narrow=ambiguous_is_narrow,
            count_ansi_escape_codes=count_ansi_escape_codes,
        )
        console.print(f"{width}\t{text}" if verbose else str(width))
