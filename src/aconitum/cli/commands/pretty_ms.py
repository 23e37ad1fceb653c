# topmark:header:start
#
#   project      : Aconitum
#   file         : pretty_ms.py
#   file_relpath : src/aconitum/cli/commands/pretty_ms.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `pretty-ms` command.

Formats a number of milliseconds as a human readable duration.
"""

from __future__ import annotations

import click

from aconitum.cli.cmd_common import get_console, get_settings
from aconitum.cli.errors import AconitumInputError
from aconitum.time.pretty_ms import PrettyMsOptions, pretty_ms


def _parse_number(value: str) -> int | float:
    """Parse MS keeping integers exact."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise AconitumInputError(f"Not a number of milliseconds: {value!r}") from None


@click.command(
    name="pretty-ms",
    help=(
        "Format MS milliseconds as a human readable duration, "
        "e.g. 1337000000 -> 15d 11h 23m 20s."
    ),
)
@click.argument("milliseconds", metavar="MS")
@click.option("--verbose-units", is_flag=True, help="Use full unit names (5 hours).")
@click.option("--compact", is_flag=True, help="Only show the largest unit.")
@click.option("--colon", "colon_notation", is_flag=True, help="Digital watch style (5:01).")
@click.option(
    "--unit-count",
    type=click.IntRange(min=1),
    default=None,
    help="Show at most this many units.",
)
@click.option("--sub-ms", "format_sub_milliseconds", is_flag=True, help="Show µs and ns.")
@click.option("--separate-ms", "separate_milliseconds", is_flag=True, help="Show ms apart.")
@click.option(
    "--seconds-digits",
    type=click.IntRange(min=0, max=20),
    default=None,
    help="Decimals for seconds. Defaults to [time] settings.",
)
@click.option(
    "--ms-digits",
    type=click.IntRange(min=0, max=20),
    default=None,
    help="Decimals for milliseconds. Defaults to [time] settings.",
)
@click.pass_context
def pretty_ms_command(
    ctx: click.Context,
    milliseconds: str,
    *,
    verbose_units: bool,
    compact: bool,
    colon_notation: bool,
    unit_count: int | None,
    format_sub_milliseconds: bool,
    separate_milliseconds: bool,
    seconds_digits: int | None,
    ms_digits: int | None,
) -> None:
    console = get_console(ctx)
    settings = get_settings(ctx).time

    options = PrettyMsOptions(
        seconds_decimal_digits=(
            settings.seconds_decimal_digits if seconds_digits is None else seconds_digits
        ),
        milliseconds_decimal_digits=(
            settings.milliseconds_decimal_digits if ms_digits is None else ms_digits
        ),
        compact=compact,
        unit_count=unit_count,
        verbose=verbose_units,
        separate_milliseconds=separate_milliseconds,
        format_sub_milliseconds=format_sub_milliseconds,
        colon_notation=colon_notation,
    )
    try:
        console.print(pretty_ms(_parse_number(milliseconds), options))
    except ValueError as exc:
        raise AconitumInputError(str(exc)) from exc
