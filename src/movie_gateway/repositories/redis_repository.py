"""Redis implementation of CacheStore.

Lets several gateway processes share one response cache. Values are stored
as JSON strings with a native Redis expiry, so an expired key simply reads
as absent.
"""

import json
import logging
from typing import Any

import redis

from movie_gateway.config import get_redis_client, settings

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis implementation using ``SET key value EX ttl``.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    All keys live under a prefix so ``clear`` and ``count`` never touch
    unrelated data in a shared Redis database.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str = "movie_gateway",
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Namespace prepended to every key.
            ttl: Time-to-live for entries in seconds.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = prefix
        self._ttl = ttl or settings.cache_ttl

    @classmethod
    def create(
        cls,
        prefix: str = "movie_gateway",
        ttl: int | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            prefix: Key namespace.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(prefix=prefix, ttl=ttl)

    @property
    def ttl(self) -> int:
        return self._ttl

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str) -> Any | None:
        """Fetch and decode a cached value.

        Args:
            key: The cache key (without prefix)

        Returns:
            The decoded value, or None if absent or expired
        """
        raw = self._client.get(self._key(key))
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        """Store a value with the configured TTL.

        Args:
            key: The cache key (without prefix)
            value: JSON-compatible payload
        """
        self._client.set(self._key(key), json.dumps(value), ex=self._ttl)

    def has(self, key: str) -> bool:
        return bool(self._client.exists(self._key(key)))

    def delete(self, key: str) -> bool:
        return bool(self._client.delete(self._key(key)))

    def _scan_keys(self) -> list[str]:
        return list(self._client.scan_iter(match=f"{self._prefix}:*"))

    def clear(self) -> int:
        """Clear all entries under the prefix.

        Returns:
            Number of entries deleted
        """
        keys = self._scan_keys()
        if not keys:
            return 0
        return int(self._client.delete(*keys))

    def count(self) -> int:
        return len(self._scan_keys())

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    def get_stats(self) -> dict:
        """Get repository statistics."""
        return {
            "backend": "redis",
            "total_entries": self.count(),
            "ttl": self._ttl,
            "prefix": self._prefix,
        }
