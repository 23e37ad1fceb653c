# topmark:header:start
#
#   project      : Aconitum
#   file         : main.py
#   file_relpath : src/aconitum/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""The ``aconitum`` Click group.

Group-level options (verbosity, color, config file) are resolved once and
placed into ``ctx.obj`` together with the console and the effective
`Settings`; subcommands only read them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aconitum.cli.commands.config import config_command
from aconitum.cli.commands.git_url import git_url_command
from aconitum.cli.commands.normalize_url import normalize_url_command
from aconitum.cli.commands.parse_duration import parse_duration_command
from aconitum.cli.commands.parse_url import parse_url_command
from aconitum.cli.commands.pretty_ms import pretty_ms_command
from aconitum.cli.commands.signals import signals_command
from aconitum.cli.commands.strip import strip_command
from aconitum.cli.commands.version import version_command
from aconitum.cli.commands.width import width_command
from aconitum.cli.commands.wrap import wrap_command
from aconitum.cli.console import ClickConsole
from aconitum.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from aconitum.config.logging import get_logger, resolve_env_log_level, setup_logging
from aconitum.config.settings import load_settings

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, settings) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Explicit configuration file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose - quiet

    # ACONITUM_LOG_LEVEL wins; otherwise -v/-q drive the log level
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    settings = load_settings(config_file=config_file)
    logger.debug("Effective settings loaded from %s", settings.source or "built-in defaults")
    ctx.obj["settings"] = settings


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Aconitum: terminal text, URL, duration and signal helpers.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the Aconitum CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'aconitum width TEXT' to measure a string.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(width_command)

cli.add_command(strip_command)

cli.add_command(wrap_command)

cli.add_command(pretty_ms_command)

cli.add_command(parse_duration_command)

cli.add_command(parse_url_command)

cli.add_command(normalize_url_command)

cli.add_command(git_url_command)

cli.add_command(signals_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
