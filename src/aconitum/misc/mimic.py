# topmark:header:start
#
#   project      : Aconitum
#   file         : mimic.py
#   file_relpath : src/aconitum/misc/mimic.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Make a wrapper function look like the function it wraps."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

_F = TypeVar("_F", bound=Callable[..., Any])


def mimic_function(target: _F, source: Callable[..., Any]) -> _F:
    """Copy the name, docstring, module, qualname, annotations and attributes of ``source``.

    ``target.__wrapped__`` is set to ``source`` so ``inspect.signature`` reports
    the signature of ``source``.

    Args:
        target (_F): The wrapper to update in place.
        source (Callable[..., Any]): The wrapped function.

    Returns:
        _F: ``target``.
    """
    return functools.update_wrapper(target, source)
