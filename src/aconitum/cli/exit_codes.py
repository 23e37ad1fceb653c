# topmark:header:start
#
#   project      : Aconitum
#   file         : exit_codes.py
#   file_relpath : src/aconitum/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Exit codes returned by the ``aconitum`` CLI.

The non-trivial values follow the BSD ``sysexits.h`` convention so shell
scripts can tell a mistyped command line from input that could not be parsed.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Aconitum CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): The command failed for a reason not covered below.
        USAGE_ERROR (int): The command line was invalid (``EX_USAGE``).
        DATA_ERROR (int): An argument could not be parsed, e.g. a malformed URL
            or duration (``EX_DATAERR``).

    Usage:
        ```python
        import subprocess
        from aconitum.cli.exit_codes import ExitCode

        result = subprocess.run(["aconitum", "parse-duration", "soon"])
        if result.returncode == ExitCode.DATA_ERROR:
            print("Not a duration.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    DATA_ERROR = 65
