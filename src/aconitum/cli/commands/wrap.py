# topmark:header:start
#
#   project      : Aconitum
#   file         : wrap.py
#   file_relpath : src/aconitum/cli/commands/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `wrap` command.

Wraps TEXT (or STDIN) to a column limit while keeping ANSI styling intact.
Options left unset fall back to the ``[wrap]`` settings.
"""

from __future__ import annotations

import click

from aconitum.ansi.format import wrap_ansi
from aconitum.cli.cmd_common import get_console, get_settings, texts_or_stdin


@click.command(
    name="wrap",
    help="Wrap TEXT (or STDIN) to a maximum width, preserving ANSI styles.",
)
@click.argument("text", required=False)
@click.option("--width", "-w", type=click.IntRange(min=1), default=None, help="Maximum columns.")
@click.option("--indent", default=None, help="Prefix for every line after the first.")
@click.option("--trim/--no-trim", default=None, help="Strip whitespace at line edges.")
@click.option(
    "--hard/--soft",
    "hard_wrap",
    default=None,
    help="Break words exactly at the limit instead of at whitespace.",
)
@click.pass_context
def wrap_command(
    ctx: click.Context,
    text: str | None,
    *,
    width: int | None,
    indent: str | None,
    trim: bool | None,
    hard_wrap: bool | None,
) -> None:
    console = get_console(ctx)
    settings = get_settings(ctx).wrap

    (source,) = texts_or_stdin([text] if text is not None else [], split_lines=False)
    # A trailing newline from STDIN is not part of the paragraph
    source = source.removesuffix("\n") if text is None else source

    console.print(
        wrap_ansi(
            source,
            settings.width if width is None else width,
            indent=settings.indent if indent is None else indent,
            trim=settings.trim if trim is None else trim,
            hard_wrap=settings.hard_wrap if hard_wrap is None else hard_wrap,
        )
    )
