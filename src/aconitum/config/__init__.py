# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum configuration: logging setup and user settings.

Settings come from ``aconitum.toml`` or ``[tool.aconitum]`` in ``pyproject.toml``,
layered over runtime defaults defined in code. See
[`aconitum.config.settings`][aconitum.config.settings].
"""
