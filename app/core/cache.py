"""In-process lookaside cache with absolute and sliding expiration.

Built on cachetools' TTLCache, which enforces the absolute deadline. The
sliding deadline is tracked per entry and pushed forward on every hit; an
entry is gone as soon as either deadline passes.

Writes to the coupon store do not touch this cache unless the caller
invalidates it, so a hit may serve a listing that is up to one absolute
window old.
"""

import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, TypeVar

from cachetools import TTLCache

T = TypeVar("T")

COUPON_LIST_KEY = "coupon_list"


@dataclass
class _Entry:
    value: Any
    last_access: float


class LookasideCache:
    def __init__(
        self,
        *,
        absolute_expiration: float,
        sliding_expiration: float,
        max_entries: int = 16,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._timer = timer
        self._sliding_expiration = sliding_expiration
        self._entries: TTLCache[Hashable, _Entry] = TTLCache(
            maxsize=max_entries,
            ttl=absolute_expiration,
            timer=timer,
        )
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            now = self._timer()
            if now - entry.last_access >= self._sliding_expiration:
                del self._entries[key]
                return None
            entry.last_access = now
            return entry.value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = _Entry(value=value, last_access=self._timer())

    def get_or_set(self, key: Hashable, factory: Callable[[], T]) -> tuple[T, bool]:
        """Return ``(value, hit)``, computing and storing the value on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached, True
        value = factory()
        self.set(key, value)
        return value, False

    def invalidate(self, key: Hashable | None = None) -> None:
        """Drop one key, or everything when no key is given."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)
