# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/ansi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""ANSI escape sequence helpers.

Submodules:
    - ``regex``: the pattern matching CSI and OSC escape sequences.
    - ``strip``: remove escape sequences from text.
    - ``styles``: SGR style tables and color-space converters.
    - ``escapes``: cursor, erase, scroll and iTerm2 control sequences.
    - ``format``: ANSI-aware wrapping, trimming and slicing.

The package initializer stays import-free; ``aconitum.text.width`` depends on
``strip`` while ``format`` depends on ``aconitum.text.width``.
"""

from __future__ import annotations
