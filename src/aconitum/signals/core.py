# topmark:header:start
#
#   project      : Aconitum
#   file         : core.py
#   file_relpath : src/aconitum/signals/core.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Standard (non realtime) signals with their usual Linux numbers."""

from __future__ import annotations

from typing import Final

from aconitum.signals.signal_types import Signal, SignalStandard
from aconitum.signals.signal_types import SignalAction as A

_ANSI = SignalStandard.ANSI
_POSIX = SignalStandard.POSIX
_BSD = SignalStandard.BSD
_SYSTEMV = SignalStandard.SYSTEMV
_OTHER = SignalStandard.OTHER

SIGNALS: Final[tuple[Signal, ...]] = (
    Signal("SIGHUP", 1, "Terminal closed", A.TERMINATE, standard=_POSIX),
    Signal("SIGINT", 2, "User interruption with CTRL-C", A.TERMINATE, standard=_ANSI),
    Signal("SIGQUIT", 3, "User interruption with CTRL-\\", A.CORE, standard=_POSIX),
    Signal("SIGILL", 4, "Invalid machine instruction", A.CORE, standard=_ANSI),
    Signal("SIGTRAP", 5, "Debugger breakpoint", A.CORE, standard=_POSIX),
    Signal("SIGABRT", 6, "Aborted", A.CORE, standard=_ANSI),
    Signal("SIGIOT", 6, "Aborted", A.CORE, standard=_BSD),
    Signal(
        "SIGBUS",
        7,
        "Bus error due to misaligned, non-existing address or paging error",
        A.CORE,
        standard=_BSD,
    ),
    Signal(
        "SIGEMT",
        7,
        "Command should be emulated but is not implemented",
        A.TERMINATE,
        standard=_OTHER,
    ),
    Signal("SIGFPE", 8, "Floating point arithmetic error", A.CORE, standard=_ANSI),
    Signal("SIGKILL", 9, "Forced termination", A.TERMINATE, forced=True, standard=_POSIX),
    Signal("SIGUSR1", 10, "Application-specific signal", A.TERMINATE, standard=_POSIX),
    Signal("SIGSEGV", 11, "Segmentation fault", A.CORE, standard=_ANSI),
    Signal("SIGUSR2", 12, "Application-specific signal", A.TERMINATE, standard=_POSIX),
    Signal("SIGPIPE", 13, "Broken pipe or socket", A.TERMINATE, standard=_POSIX),
    Signal("SIGALRM", 14, "Timeout or timer", A.TERMINATE, standard=_POSIX),
    Signal("SIGTERM", 15, "Termination", A.TERMINATE, standard=_ANSI),
    Signal("SIGSTKFLT", 16, "Stack is empty or overflowed", A.TERMINATE, standard=_OTHER),
    Signal(
        "SIGCHLD", 17, "Child process terminated, paused or unpaused", A.IGNORE, standard=_POSIX
    ),
    Signal(
        "SIGCLD", 17, "Child process terminated, paused or unpaused", A.IGNORE, standard=_OTHER
    ),
    Signal("SIGCONT", 18, "Unpaused", A.UNPAUSE, forced=True, standard=_POSIX),
    Signal("SIGSTOP", 19, "Paused", A.PAUSE, forced=True, standard=_POSIX),
    Signal("SIGTSTP", 20, 'Paused using CTRL-Z or "suspend"', A.PAUSE, standard=_POSIX),
    Signal(
        "SIGTTIN", 21, "Background process cannot read terminal input", A.PAUSE, standard=_POSIX
    ),
    Signal("SIGBREAK", 21, "User interruption with CTRL-BREAK", A.TERMINATE, standard=_OTHER),
    Signal(
        "SIGTTOU",
        22,
        "Background process cannot write to terminal output",
        A.PAUSE,
        standard=_POSIX,
    ),
    Signal("SIGURG", 23, "Socket received out-of-band data", A.IGNORE, standard=_BSD),
    Signal("SIGXCPU", 24, "Process timed out", A.CORE, standard=_BSD),
    Signal("SIGXFSZ", 25, "File too big", A.CORE, standard=_BSD),
    Signal("SIGVTALRM", 26, "Timeout or timer", A.TERMINATE, standard=_BSD),
    Signal("SIGPROF", 27, "Timeout or timer", A.TERMINATE, standard=_BSD),
    Signal("SIGWINCH", 28, "Terminal window size changed", A.IGNORE, standard=_BSD),
    Signal("SIGIO", 29, "I/O is available", A.TERMINATE, standard=_OTHER),
    Signal("SIGPOLL", 29, "Watched event", A.TERMINATE, standard=_OTHER),
    Signal("SIGINFO", 29, "Request for process information", A.IGNORE, standard=_OTHER),
    Signal("SIGPWR", 30, "Device running out of power", A.TERMINATE, standard=_SYSTEMV),
    Signal("SIGSYS", 31, "Invalid system call", A.CORE, standard=_OTHER),
    Signal("SIGUNUSED", 31, "Invalid system call", A.TERMINATE, standard=_OTHER),
)
