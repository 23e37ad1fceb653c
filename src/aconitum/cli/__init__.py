# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum CLI package.

This package groups the Click command definitions and supporting utilities
for the ``aconitum`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        aconitum = "aconitum.cli.main:cli"

All subcommands live in [`aconitum.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
