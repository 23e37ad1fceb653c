# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/urls/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""URL helpers: structural splitting, protocol lists, SSH detection, parsing and normalization."""

from __future__ import annotations
