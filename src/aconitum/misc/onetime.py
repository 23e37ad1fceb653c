# topmark:header:start
#
#   project      : Aconitum
#   file         : onetime.py
#   file_relpath : src/aconitum/misc/onetime.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Decorator ensuring a function body runs only once.

Example:
    ```python
    @onetime
    def init() -> str:
        return "ready"

    init()
    init()  # returns "ready" without running the body again
    onetime.call_count(init)  # 2
    ```
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

from aconitum.config.logging import get_logger
from aconitum.misc.mimic import mimic_function

logger = get_logger(__name__)

_R = TypeVar("_R")


class _Once(Generic[_R]):
    """Callable wrapper holding the first result and the call count."""

    def __init__(self, func: Callable[..., _R], throw: bool) -> None:
        self._func: Callable[..., _R] | None = func
        self._name: str = getattr(func, "__qualname__", None) or "<anonymous>"
        self._throw = throw
        self._result: _R | None = None
        self._lock = threading.RLock()
        self.call_count = 0
        mimic_function(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> _R | None:
        with self._lock:
            self.call_count += 1
            func = self._func
            if func is None:
                if self._throw:
                    raise RuntimeError(f"Function `{self._name}` can only be called once.")
                return self._result
            self._func = None
            # Later callers block on the lock until the first result is stored.
            self._result = func(*args, **kwargs)
            logger.trace("%s ran once", self._name)
            return self._result


class _OnetimeFactory:
    """The ``onetime`` decorator, usable bare or with options."""

    @overload
    def __call__(self, func: Callable[..., _R], *, throw: bool = False) -> _Once[_R]: ...
    @overload
    def __call__(
        self, func: None = None, *, throw: bool = False
    ) -> Callable[[Callable[..., _R]], _Once[_R]]: ...
    def __call__(
        self,
        func: Callable[..., _R] | None = None,
        *,
        throw: bool = False,
    ) -> _Once[_R] | Callable[[Callable[..., _R]], _Once[_R]]:
        """Wrap ``func`` so its body runs once; later calls return the first result.

        Args:
            func (Callable[..., _R] | None): The function. Omit it to get a
                decorator configured with ``throw``.
            throw (bool): Raise ``RuntimeError`` on calls after the first.

        Raises:
            TypeError: If ``func`` is not callable.
        """
        if func is None:
            return lambda f: self(f, throw=throw)
        if not callable(func):
            raise TypeError("Expected a function")
        return _Once(func, throw)

    @staticmethod
    def call_count(func: Callable[..., Any]) -> int:
        """Return how many times the wrapped ``func`` was called.

        Raises:
            TypeError: If ``func`` is not wrapped by ``onetime``.
        """
        if not isinstance(func, _Once):
            name = getattr(func, "__name__", repr(func))
            raise TypeError(f"The given function `{name}` is not wrapped by `onetime`")
        return func.call_count


onetime = _OnetimeFactory()
