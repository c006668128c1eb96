"""Process-wide cache of the system time zone identifier.

The host's zone is expensive to look up and rarely changes, so it is
computed once and kept until ``invalidate`` is called. Hosts whose zone
can change while running (test harnesses, long-lived services reacting
to a configuration change) call ``invalidate`` explicitly; nothing
expires on its own.

A lookup racing an ``invalidate`` may still return the value that was
cached before the invalidation.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class SystemZoneCache:
    """Thread-safe holder for one lazily computed zone identifier.

    Examples:
        >>> cache = SystemZoneCache()
        >>> cache.get_or_compute(lambda: "Europe/Paris")
        'Europe/Paris'
        >>> cache.get_or_compute(lambda: "Asia/Tokyo")
        'Europe/Paris'
        >>> cache.invalidate()
        >>> cache.get_or_compute(lambda: "Asia/Tokyo")
        'Asia/Tokyo'
    """

    __slots__ = ("_value", "_lock")

    def __init__(self) -> None:
        self._value: str | None = None
        self._lock = threading.Lock()

    @property
    def value(self) -> str | None:
        """Return the cached identifier without computing it."""
        return self._value

    def get_or_compute(self, compute: Callable[[], str | None]) -> str | None:
        """Return the cached identifier, computing it on first use.

        Concurrent first callers compute the value once; the others wait
        and receive the same result. A ``compute`` that returns None or
        raises leaves the cache empty, so the next lookup computes again.
        """
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is None:
                value = compute()
                if value is None:
                    return None
                self._value = value
                logger.debug("cached system time zone %r", value)
            return self._value

    def invalidate(self) -> None:
        """Forget the cached identifier; the next lookup recomputes it."""
        with self._lock:
            if self._value is not None:
                logger.debug("invalidated cached system time zone %r", self._value)
            self._value = None


__all__ = ["SystemZoneCache"]
