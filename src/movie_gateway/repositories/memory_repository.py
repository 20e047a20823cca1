"""In-process implementation of CacheStore.

The default response cache: one ``cachetools.TTLCache`` per process, created
empty at startup and discarded at exit. Expiry is evaluated on access.
"""

import math
import time
from collections.abc import Callable
from typing import Any

from cachetools import TTLCache

from movie_gateway.config import settings


class InMemoryCacheRepository:
    """TTLCache-backed response cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    The cache is unbounded (``maxsize=math.inf``); entries leave only by
    expiring. Every method runs without awaiting, so concurrent request tasks
    interleave safely on the event loop and the last ``set`` for a key wins.
    """

    def __init__(
        self,
        ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache.

        Args:
            ttl: Time-to-live for entries in seconds. Defaults to settings.
            clock: Monotonic time source, injectable for tests.
        """
        self._ttl = ttl or settings.cache_ttl
        self._cache: TTLCache = TTLCache(maxsize=math.inf, ttl=self._ttl, timer=clock)

    @classmethod
    def create(cls, ttl: int | None = None) -> "InMemoryCacheRepository":
        """Factory method to create InMemoryCacheRepository with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured InMemoryCacheRepository
        """
        return cls(ttl=ttl)

    @property
    def ttl(self) -> int:
        return self._ttl

    def get(self, key: str) -> Any | None:
        return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def has(self, key: str) -> bool:
        return key in self._cache

    def delete(self, key: str) -> bool:
        if key not in self._cache:
            return False
        del self._cache[key]
        return True

    def clear(self) -> int:
        self._cache.expire()
        count = len(self._cache)
        self._cache.clear()
        return count

    def count(self) -> int:
        self._cache.expire()
        return len(self._cache)

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        """Get repository statistics."""
        return {
            "backend": "memory",
            "total_entries": self.count(),
            "ttl": self._ttl,
        }
