# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum package.

Aconitum is a collection of small, independent helpers: display width of
Unicode strings, ANSI styling and wrapping, URL and git URL parsing,
duration formatting, signal tables and path utilities. Each subpackage can be
imported on its own; a thin ``aconitum`` CLI exposes the most useful ones.
"""

from __future__ import annotations
