# topmark:header:start
#
#   project      : Aconitum
#   file         : parse_duration.py
#   file_relpath : src/aconitum/cli/commands/parse_duration.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `parse-duration` command.

Converts a duration such as ``2 days`` or ``1.5h`` to milliseconds.
"""

from __future__ import annotations

import math

import click

from aconitum.cli.cmd_common import get_console
from aconitum.cli.errors import AconitumInputError
from aconitum.time import millies


@click.command(
    name="parse-duration",
    help="Print TEXT (e.g. '2 days', '1.5h', '100') as milliseconds.",
)
@click.argument("text")
@click.option("--long", "long_format", is_flag=True, help="Also print the duration in words.")
@click.pass_context
def parse_duration_command(ctx: click.Context, text: str, *, long_format: bool) -> None:
    console = get_console(ctx)
    try:
        value = millies.parse(text)
    except millies.DurationError as exc:
        raise AconitumInputError(str(exc)) from exc
    if math.isnan(value):
        raise AconitumInputError(f"Not a duration: {text!r}")

    rendered = str(int(value)) if value.is_integer() else repr(value)
    if long_format:
        rendered = f"{rendered}\t{millies.format(value, long=True)}"
    console.print(rendered)
