# topmark:header:start
#
#   project      : Aconitum
#   file         : signal_types.py
#   file_relpath : src/aconitum/signals/signal_types.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Signal record and its enumerations."""

from __future__ import annotations

from dataclasses import dataclass

from aconitum.core.enum_mixins import KeyedStrEnum


class SignalAction(KeyedStrEnum):
    """Default action taken by a process receiving a signal."""

    TERMINATE = ("terminate", "Terminate the process")
    CORE = ("core", "Terminate and dump core", ("dump",))
    IGNORE = ("ignore", "Ignore the signal")
    PAUSE = ("pause", "Stop the process", ("stop",))
    UNPAUSE = ("unpause", "Continue a stopped process", ("continue", "cont"))


class SignalStandard(KeyedStrEnum):
    """Standard that defines a signal."""

    ANSI = ("ansi", "ANSI C", ("c",))
    POSIX = ("posix", "POSIX")
    BSD = ("bsd", "BSD")
    SYSTEMV = ("systemv", "System V", ("sysv",))
    OTHER = ("other", "Other")


@dataclass(frozen=True)
class Signal:
    """A process signal.

    Attributes:
        name (str): Signal name, e.g. ``SIGTERM``.
        number (int): Signal number on this platform, or the usual Linux number
            when the platform lacks the signal.
        description (str): What the signal means.
        action (SignalAction): Default action on receipt.
        forced (bool): The signal cannot be caught, blocked or ignored.
        standard (SignalStandard): Standard defining the signal.
        supported (bool): The running platform defines the signal.
    """

    name: str
    number: int
    description: str
    action: SignalAction
    forced: bool = False
    standard: SignalStandard = SignalStandard.POSIX
    supported: bool = False
