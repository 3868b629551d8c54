"""Simple in-memory TTL cache keyed by upstream URL.

Entries are never evicted: a stale entry simply stops being returned and is
overwritten by the next successful fetch for the same key. Each uvicorn
worker has its own instance.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable

MISSING = object()


@dataclass
class CacheEntry:
    url: str
    timestamp: float
    payload: Any


class TTLCache:
    def __init__(self, ttl_seconds: float = 30, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._store)

    def now(self) -> float:
        return self._clock()

    def get(self, key: str, default: Any = None, now: float | None = None) -> Any:
        if now is None:
            now = self._clock()
        entry = self._store.get(key)
        if entry is not None and now - entry.timestamp < self.ttl_seconds:
            return entry.payload
        return default

    def set(self, key: str, value: Any, timestamp: float | None = None) -> None:
        if timestamp is None:
            timestamp = self._clock()
        self._store[key] = CacheEntry(url=key, timestamp=timestamp, payload=value)
