# topmark:header:start
#
#   project      : Aconitum
#   file         : __main__.py
#   file_relpath : src/aconitum/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Module entry point for running Aconitum via ``python -m aconitum``.

It delegates directly to :func:`aconitum.cli.main.cli`, the same group the
``aconitum`` console script runs.

Examples:
    Measure the display width of a string::

        python -m aconitum width "古池や"
"""

from __future__ import annotations

from aconitum.cli.main import cli

if __name__ == "__main__":
    cli()
