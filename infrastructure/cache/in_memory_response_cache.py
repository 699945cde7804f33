"""Process-local reply cache with a fixed time-to-live."""
from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from domain.interfaces import ResponseCache

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_MAX_ENTRIES = 512


@dataclass(slots=True)
class CacheEntry:
    value: str
    timestamp: float


def cache_key(message: str) -> str:
    """Questions differing only in case or surrounding spaces share an entry."""
    return message.strip().lower()


class InMemoryResponseCache(ResponseCache):
    """Keeps replies in an ordered dict guarded by a lock.

    Expiry is checked on read: an entry older than the TTL is treated as absent
    and dropped at that moment. The oldest entries are evicted once
    ``max_entries`` is exceeded.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max = max_entries
        self._clock = clock
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        key = cache_key(key)
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp > self._ttl:
                self._store.pop(key, None)
                return None
            self._store.move_to_end(key)
            return entry.value

    def set(self, key: str, value: str) -> None:
        key = cache_key(key)
        with self._lock:
            self._store[key] = CacheEntry(value=value, timestamp=self._clock())
            self._store.move_to_end(key)
            while len(self._store) > self._max:
                self._store.popitem(last=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


__all__ = ["CacheEntry", "InMemoryResponseCache", "cache_key"]
