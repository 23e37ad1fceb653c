# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Subcommands of the ``aconitum`` CLI, one module per command."""
