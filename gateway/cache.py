"""Expiring key-value store shared by the pair resolver and gas price service.

Entries carry their own time-to-live. A read past expiry behaves exactly like
a read of a key that was never written; there is no explicit delete.

Values are replaced wholesale on every write and must not be mutated after
being stored, which is what lets concurrent readers and writers share one
store without locking.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog
from cachetools import TLRUCache

from gateway.constants import DEFAULT_CACHE_MAX_ITEMS

logger = structlog.get_logger()


@dataclass(frozen=True)
class _Entry:
    value: Any
    ttl_seconds: float


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl_seconds


class CacheStore:
    """TTL cache keyed by string with per-entry expiry.

    Args:
        max_items: Capacity before least-recently-used entries are dropped
        timer: Monotonic clock in seconds (override in tests)
    """

    def __init__(
        self,
        max_items: int = DEFAULT_CACHE_MAX_ITEMS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_items, ttu=_time_to_use, timer=timer
        )

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if absent or expired."""
        entry = self._cache.get(key)
        if entry is None:
            return None
        return entry.value

    def set(self, key: str, value: Any, ttl_ms: int) -> None:
        """Store value under key, replacing any previous entry.

        Args:
            key: Cache key
            value: Immutable value to store
            ttl_ms: Time-to-live in milliseconds, counted from now
        """
        if ttl_ms <= 0:
            # An already-expired entry is never inserted; drop the old one too
            self._cache.pop(key, None)
            return
        self._cache[key] = _Entry(value=value, ttl_seconds=ttl_ms / 1000)
        logger.debug("cache_set", key=key, ttl_ms=ttl_ms)

    def __len__(self) -> int:
        self._cache.expire()
        return len(self._cache)


__all__ = ["CacheStore"]
