# topmark:header:start
#
#   project      : Aconitum
#   file         : main.py
#   file_relpath : src/aconitum/signals/main.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Signal tables normalized for the running platform, indexed by name and number."""

from __future__ import annotations

import signal as _signal
from dataclasses import replace
from functools import lru_cache
from typing import TYPE_CHECKING, Final

from aconitum.config.logging import get_logger
from aconitum.signals.core import SIGNALS
from aconitum.signals.realtime import SIGRTMAX, get_realtime_signals
from aconitum.signals.signal_types import Signal

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

_REALTIME_PREFIX: Final[str] = "SIGRT"


def platform_signal_number(name: str) -> int | None:
    """Return the number of signal ``name`` on this platform, or None if undefined.

    Realtime signals ``SIGRT<n>`` resolve relative to the platform's ``SIGRTMIN``.
    """
    value = getattr(_signal, name, None)
    if isinstance(value, int) and name.startswith("SIG") and not name.startswith("SIG_"):
        return int(value)

    suffix = name.removeprefix(_REALTIME_PREFIX)
    rtmin = getattr(_signal, "SIGRTMIN", None)
    rtmax = getattr(_signal, "SIGRTMAX", None)
    if name.startswith(_REALTIME_PREFIX) and suffix.isdigit() and rtmin is not None:
        number = int(rtmin) + int(suffix) - 1
        if rtmax is None or number <= int(rtmax):
            return number
    return None


def normalize_signal(sig: Signal) -> Signal:
    """Apply the platform number and support flag to ``sig``."""
    number = platform_signal_number(sig.name)
    if number is None:
        return replace(sig, supported=False)
    return replace(sig, number=number, supported=True)


@lru_cache(maxsize=1)
def get_signals() -> tuple[Signal, ...]:
    """Return all known signals, realtime ones last, normalized for this platform."""
    signals = tuple(normalize_signal(sig) for sig in (*SIGNALS, *get_realtime_signals()))
    logger.debug(
        "%d signals known, %d supported on this platform",
        len(signals),
        sum(sig.supported for sig in signals),
    )
    return signals


def _find_signal_by_number(number: int, signals: tuple[Signal, ...]) -> Signal | None:
    for sig in signals:
        if platform_signal_number(sig.name) == number:
            return sig
    return next((sig for sig in signals if sig.number == number), None)


def get_signals_by_name() -> dict[str, Signal]:
    return {sig.name: sig for sig in get_signals()}


def get_signals_by_number() -> dict[int, Signal]:
    """Map each number from 0 to ``SIGRTMAX`` to its preferred signal.

    A signal defined under that number on this platform wins over the default table.
    """
    signals = get_signals()
    by_number: dict[int, Signal] = {}
    for number in range(SIGRTMAX + 1):
        sig = _find_signal_by_number(number, signals)
        if sig is not None:
            by_number[number] = sig
    return by_number


signals_by_name: Final[dict[str, Signal]] = get_signals_by_name()
signals_by_number: Final[dict[int, Signal]] = get_signals_by_number()
