# topmark:header:start
#
#   project      : Aconitum
#   file         : keys.py
#   file_relpath : src/aconitum/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Canonical TOML section and key names for Aconitum settings.

Renaming or removing a key is a breaking change for user configuration files.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys, as they appear in ``aconitum.toml``."""

    # [width]
    SECTION_WIDTH: Final[str] = "width"

    KEY_AMBIGUOUS_IS_NARROW: Final[str] = "ambiguous_is_narrow"
    KEY_COUNT_ANSI_ESCAPE_CODES: Final[str] = "count_ansi_escape_codes"

    # [wrap]
    SECTION_WRAP: Final[str] = "wrap"

    KEY_WIDTH: Final[str] = "width"
    KEY_INDENT: Final[str] = "indent"
    KEY_TRIM: Final[str] = "trim"
    KEY_HARD_WRAP: Final[str] = "hard_wrap"

    # [urls]
    SECTION_URLS: Final[str] = "urls"

    KEY_MAX_INPUT_LENGTH: Final[str] = "max_input_length"
    KEY_DEFAULT_PROTOCOL: Final[str] = "default_protocol"

    # [time]
    SECTION_TIME: Final[str] = "time"

    KEY_SECONDS_DECIMAL_DIGITS: Final[str] = "seconds_decimal_digits"
    KEY_MILLISECONDS_DECIMAL_DIGITS: Final[str] = "milliseconds_decimal_digits"
