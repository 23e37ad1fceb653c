# topmark:header:start
#
#   project      : Aconitum
#   file         : strip.py
#   file_relpath : src/aconitum/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `strip` command.

Removes ANSI escape sequences from TEXT arguments or from STDIN.
"""

from __future__ import annotations

import click

from aconitum.ansi.strip import strip_ansi
from aconitum.cli.cmd_common import get_console, texts_or_stdin


@click.command(
    name="strip",
    help="Remove ANSI escape codes from each TEXT (or from STDIN).",
)
@click.argument("texts", nargs=-1, metavar="[TEXT]...")
@click.pass_context
def strip_command(ctx: click.Context, texts: tuple[str, ...]) -> None:
    console = get_console(ctx)
    if texts:
        for text in texts:
            console.print(strip_ansi(text))
        return
    # STDIN is echoed back as-is, including its final newline (or lack of one)
    for text in texts_or_stdin(texts, split_lines=False):
        console.print(strip_ansi(text), nl=False)
