# topmark:header:start
#
#   project      : Aconitum
#   file         : signals.py
#   file_relpath : src/aconitum/cli/commands/signals.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `signals` command.

Without an argument, lists every known process signal. With a NAME (``SIGTERM``
or ``term``) or a NUMBER, prints that signal only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aconitum.cli.cmd_common import get_console, get_effective_verbosity
from aconitum.cli.errors import AconitumInputError
from aconitum.cli.options import OutputFormat, output_format_option
from aconitum.signals.main import get_signals, signals_by_name, signals_by_number

if TYPE_CHECKING:
    from aconitum.cli.console import ClickConsole
    from aconitum.signals.signal_types import Signal


def lookup_signal(token: str) -> Signal:
    """Find a signal by number, name, or name without the ``SIG`` prefix.

    Raises:
        AconitumInputError: If no signal matches.
    """
    token = token.strip()
    if token.isdigit():
        sig = signals_by_number.get(int(token))
    else:
        name = token.upper()
        sig = signals_by_name.get(name) or signals_by_name.get(f"SIG{name}")
    if sig is None:
        raise AconitumInputError(f"Unknown signal: {token!r}")
    return sig


def _as_dict(sig: Signal) -> dict[str, object]:
    return {
        "name": sig.name,
        "number": sig.number,
        "description": sig.description,
        "action": sig.action.key,
        "forced": sig.forced,
        "standard": sig.standard.key,
        "supported": sig.supported,
    }


def _print_row(console: ClickConsole, sig: Signal, *, verbose: bool) -> None:
    row = f"{console.styled(f'{sig.name:<10}', bold=True)} {sig.number:>3}  {sig.action.key:<9}"
    if verbose:
        row += f" {sig.standard.label:<8} {'forced' if sig.forced else '':<6}"
    console.print(f"{row} {sig.description}")


@click.command(
    name="signals",
    help="List process signals, or show the one named by NAME or NUMBER.",
)
@click.argument("signal_id", metavar="[NAME|NUMBER]", required=False)
@output_format_option
@click.pass_context
def signals_command(
    ctx: click.Context,
    signal_id: str | None,
    *,
    output_format: OutputFormat,
) -> None:
    console = get_console(ctx)
    verbose = get_effective_verbosity(ctx) > 0

    selected = [lookup_signal(signal_id)] if signal_id is not None else list(get_signals())

    if output_format == OutputFormat.JSON:
        payload = [_as_dict(sig) for sig in selected]
        console.emit_json(payload[0] if signal_id is not None else payload)
        return

    for sig in selected:
        _print_row(console, sig, verbose=verbose)
