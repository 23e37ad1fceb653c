# topmark:header:start
#
#   project      : Aconitum
#   file         : version.py
#   file_relpath : src/aconitum/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `version` command.

Prints the Aconitum version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from aconitum.cli.cmd_common import get_console, get_effective_verbosity
from aconitum.cli.options import OutputFormat, output_format_option
from aconitum.constants import ACONITUM_VERSION


@click.command(
    name="version",
    help="Show the current version of Aconitum.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of Aconitum.

    Args:
        ctx (click.Context): The Click context.
        output_format (OutputFormat): Plain text or JSON.
    """
    console = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.emit_json({"version": ACONITUM_VERSION}, indent=None)
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Aconitum version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(ACONITUM_VERSION, bold=True)}")
    else:
        console.print(console.styled(ACONITUM_VERSION, bold=True))
