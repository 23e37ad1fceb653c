# topmark:header:start
#
#   project      : Aconitum
#   file         : realtime.py
#   file_relpath : src/aconitum/signals/realtime.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""POSIX realtime signals ``SIGRT1`` to ``SIGRT31``."""

from __future__ import annotations

from typing import Final

from aconitum.signals.signal_types import Signal, SignalAction, SignalStandard

SIGRTMIN: Final[int] = 34
SIGRTMAX: Final[int] = 64


def get_realtime_signals() -> list[Signal]:
    """Return the realtime signals with their usual Linux numbers."""
    return [
        Signal(
            name=f"SIGRT{index + 1}",
            number=SIGRTMIN + index,
            description="Application-specific signal (realtime)",
            action=SignalAction.TERMINATE,
            standard=SignalStandard.POSIX,
        )
        for index in range(SIGRTMAX - SIGRTMIN + 1)
    ]
