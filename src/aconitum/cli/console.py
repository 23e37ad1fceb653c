# topmark:header:start
#
#   project      : Aconitum
#   file         : console.py
#   file_relpath : src/aconitum/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Console used by commands for their results.

Diagnostics go through ``logging``; everything a user or a script consumes is
written through the `ClickConsole` kept in ``ctx.obj["console"]``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Write command results with optional styling.

    The streams are looked up on each write when not given explicitly, so output
    follows ``sys.stdout``/``sys.stderr`` replacements such as ``CliRunner``'s.

    Args:
        enable_color (bool): Emit ANSI styling when True.
        out (TextIO | None): Result stream, ``sys.stdout`` when None.
        err (TextIO | None): Error stream, ``sys.stderr`` when None.
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream in red."""
        click.echo(
            self.styled(text, fg="bright_red"),
            nl=nl,
            file=self.err or sys.stderr,
            color=self.enable_color,
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply ``click.style`` to ``text`` unless color is disabled."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def field(self, label: str, value: object, *, label_width: int) -> None:
        """Print a ``label value`` row with the label in bold.

        Empty values (None, empty strings and empty lists) print as an empty cell; lists
        are joined with commas.
        """
        if isinstance(value, list):
            value = ",".join(str(item) for item in value)
        cell = "" if value is None else str(value)
        self.print(f"{self.styled(f'{label:<{label_width}}', bold=True)} {cell}".rstrip())

    def emit_json(self, payload: Any, *, indent: int | None = 2) -> None:
        """Print ``payload`` as JSON."""
        self.print(json.dumps(payload, indent=indent))
