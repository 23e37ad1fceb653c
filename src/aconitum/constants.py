# topmark:header:start
#
#   project      : Aconitum
#   file         : constants.py
#   file_relpath : src/aconitum/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ACONITUM_VERSION: str = get_version("aconitum")
except PackageNotFoundError:  # running from a source checkout
    ACONITUM_VERSION = "0.0.0"

# Config file names, looked up from the working directory upwards
ACONITUM_TOML_NAME: str = "aconitum.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "aconitum"

# Default upper bound for URLs handed to the URL parser
MAX_URL_INPUT_LENGTH: int = 2048

VALUE_NOT_SET: str = "<not set>"
