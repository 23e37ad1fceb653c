# topmark:header:start
#
#   project      : Aconitum
#   file         : test_onetime.py
#   file_relpath : tests/misc/test_onetime.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

# pyright: strict

"""Tests for `onetime` and `mimic_function`."""

from __future__ import annotations

import inspect
import threading
from typing import Any

import pytest

from aconitum.misc.mimic import mimic_function
from aconitum.misc.onetime import onetime


def test_runs_once_and_caches_the_result() -> None:
    calls: list[int] = []

    @onetime
    def init(value: int) -> int:
        calls.append(value)
        return value * 2

    assert init(2) == 4
    assert init(5) == 4
    assert calls == [2]
    assert onetime.call_count(init) == 2


def test_throw_option() -> None:
    @onetime(throw=True)
    def init() -> str:
        return "ready"

    assert init() == "ready"
    with pytest.raises(RuntimeError, match="init"):
        init()
    assert onetime.call_count(init) == 2


def test_wrapper_looks_like_the_function() -> None:
    def greet(name: str) -> str:
        """Say hello."""
        return f"hello {name}"

    wrapped = onetime(greet)
    assert wrapped.__name__ == "greet"  # type: ignore[attr-defined]
    assert wrapped.__doc__ == "Say hello."
    assert list(inspect.signature(wrapped).parameters) == ["name"]


def test_concurrent_calls_run_the_body_once() -> None:
    calls: list[int] = []
    gate = threading.Event()

    @onetime
    def init() -> str:
        gate.wait(1)
        calls.append(1)
        return "ready"

    results: list[str | None] = []
    results_lock = threading.Lock()

    def call() -> None:
        value = init()
        with results_lock:
            results.append(value)

    threads = [threading.Thread(target=call) for _ in range(8)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()
    assert calls == [1]
    assert results == ["ready"] * 8
    assert onetime.call_count(init) == 8


def test_callers_wait_for_a_running_first_call() -> None:
    entered = threading.Event()
    release = threading.Event()

    @onetime
    def init() -> str:
        entered.set()
        release.wait(5)
        return "ready"

    results: list[str | None] = [None, None]

    def call(slot: int) -> None:
        results[slot] = init()

    first = threading.Thread(target=call, args=(0,))
    first.start()
    assert entered.wait(5)
    second = threading.Thread(target=call, args=(1,))
    second.start()
    second.join(0.2)
    assert second.is_alive()
    release.set()
    first.join()
    second.join()
    assert results == ["ready", "ready"]


def test_rejects_non_callables() -> None:
    with pytest.raises(TypeError, match="Expected a function"):
        onetime(42)  # type: ignore[call-overload]


def test_call_count_requires_a_wrapped_function() -> None:
    def plain() -> None: ...

    with pytest.raises(TypeError, match="plain"):
        onetime.call_count(plain)


def test_mimic_function_copies_metadata() -> None:
    def source(a: int, b: int = 1) -> int:
        """Add things."""
        return a + b

    source.custom = "kept"  # type: ignore[attr-defined]

    def target(*args: Any, **kwargs: Any) -> int:
        return source(*args, **kwargs)

    result = mimic_function(target, source)
    assert result is target
    assert target.__name__ == "source"
    assert target.__doc__ == "Add things."
    assert target.custom == "kept"  # type: ignore[attr-defined]
    assert list(inspect.signature(target).parameters) == ["a", "b"]
