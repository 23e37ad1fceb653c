# topmark:header:start
#
#   project      : Aconitum
#   file         : config.py
#   file_relpath : src/aconitum/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `config` command group.

``config dump`` renders the effective settings (built-in defaults overridden by
the discovered or ``--config`` file) as TOML, ready to be saved as
``aconitum.toml`` or pasted into ``pyproject.toml``.
"""

from __future__ import annotations

import click

from aconitum.cli.cmd_common import get_console, get_settings
from aconitum.config.settings import Settings, load_defaults_dict, to_toml


@click.group(
    name="config",
    help="Inspect Aconitum settings.",
)
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(
    name="dump",
    help="Print the effective settings as TOML.",
)
@click.option("--defaults", "defaults_only", is_flag=True, help="Ignore configuration files.")
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.aconitum] for pyproject.toml.",
)
@click.pass_context
def dump_command(ctx: click.Context, *, defaults_only: bool, for_pyproject: bool) -> None:
    console = get_console(ctx)
    settings: Settings = get_settings(ctx)

    table = load_defaults_dict() if defaults_only else settings.to_toml_dict()
    if settings.source is not None and not defaults_only:
        console.print(f"# Source: {settings.source}")
    console.print(to_toml(table, for_pyproject=for_pyproject), nl=False)
