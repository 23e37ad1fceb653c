# topmark:header:start
#
#   project      : Aconitum
#   file         : errors.py
#   file_relpath : src/aconitum/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Exceptions raised by Aconitum commands.

Commands translate library errors (``UrlParseError``, ``GitUrlError``, ``DurationError``)
into one of these at the command boundary, which fixes the process exit code:

- `AconitumUsageError`: the command line itself is wrong (exit 64).
- `AconitumInputError`: an argument could not be parsed (exit 65).
"""

from __future__ import annotations

from typing import IO, Any

import click

from aconitum.cli.console import ClickConsole
from aconitum.cli.exit_codes import ExitCode


class AconitumError(click.ClickException):
    """Base class for all Aconitum CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Report the error on the console stored in the current context.

        Without a console (errors raised before the group callback ran) Click's own
        rendering is used.
        """
        ctx = click.get_current_context(silent=True)
        obj: object = ctx.obj if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if isinstance(console, ClickConsole):
            console.error(f"Error: {self.format_message()}")
        else:
            super().show(file)


class AconitumUsageError(AconitumError):
    """Error for command-line invocation errors (invalid or conflicting flags)."""

    exit_code = ExitCode.USAGE_ERROR


class AconitumInputError(AconitumError):
    """Error for arguments that could not be parsed (URLs, durations, numbers)."""

    exit_code = ExitCode.DATA_ERROR
