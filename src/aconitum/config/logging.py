# topmark:header:start
#
#   project      : Aconitum
#   file         : logging.py
#   file_relpath : src/aconitum/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum logging with an extra TRACE level.

This module extends the standard logging module with a custom TRACE level, a
logger class exposing ``.trace()``, and a chalk-colored formatter for terminal output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "ACONITUM_LOG_LEVEL"


class AconitumLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg`` using string formatting.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(AconitumLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Color each formatted record by severity.

    Records below TRACE (custom levels) are rendered dim red so they stand out.
    """

    # (lowest level, chalk style), most severe first
    STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        style = next(
            (style for threshold, style in self.STYLES if record.levelno >= threshold),
            chalk.dim.red,
        )
        return style(text)


# Level names accepted in ACONITUM_LOG_LEVEL, besides plain numbers.
LEVEL_NAMES: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": TRACE_LEVEL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Read the log level requested through ``ACONITUM_LOG_LEVEL``.

    Args:
        environ (Mapping[str, str] | None): Environment to read, ``os.environ`` by default.

    Returns:
        int | None: The level for a known name (``"trace"``, ``"INFO"``...) or a
            number (``"10"``), else None.
    """
    raw = (os.environ if environ is None else environ).get(ENV_LOG_LEVEL, "").strip().upper()
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Send all log records to stdout through a `ChalkFormatter`.

    ``level`` defaults to the environment's choice, then to CRITICAL, which keeps
    the library silent. Below INFO the format also names the source location.
    Calling this again replaces the previous handler.
    """
    if level is None:
        env_level = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logging.getLogger().propagate = False


def get_logger(name: str) -> AconitumLogger:
    return cast("AconitumLogger", logging.getLogger(name))
