"""Custom decorators for Epochal.

This module provides decorator utilities for the library:
    - @memoize: Thread-safe memoization for loaders of static data

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import threading
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Memoize a function with hashable arguments.

    Intended for loaders of static reference data, such as the table of
    time zone links, that are expensive to build and never change during
    the life of the process. Concurrent first calls with the same
    arguments compute the value once.

    The wrapper exposes ``cache_clear()`` so tests can force a reload.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def zone_aliases() -> dict[str, str]:
        ...     return {"etc/utc": "UTC"}
    """
    cache: dict[tuple, T] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        with lock:
            if key not in cache:
                cache[key] = func(*args, **kwargs)
            return cache[key]

    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
