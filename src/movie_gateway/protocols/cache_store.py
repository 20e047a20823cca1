"""Cache storage protocol.

Defines the interface for any key/value backend that can hold upstream
responses for a fixed time-to-live.

Implementations can include:
- In-process dictionary (default)
- Redis (shared between worker processes)
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for response cache backends.

    Any type that implements these methods satisfies the protocol, no explicit
    inheritance needed. Values are JSON-compatible payloads.

    Example:
        ```python
        from movie_gateway.protocols import CacheStore

        store: CacheStore = InMemoryCacheRepository(ttl=86400)
        store: CacheStore = RedisCacheRepository.create()
        ```
    """

    @property
    def ttl(self) -> int:
        """Return the time-to-live applied to every entry, in seconds."""
        ...

    def get(self, key: str) -> Any | None:
        """Return the stored value if present and not expired.

        Args:
            key: The cache key

        Returns:
            The cached value, or None if absent or expired
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a value, overwriting any prior entry and resetting its TTL.

        Args:
            key: The cache key
            value: JSON-compatible payload
        """
        ...

    def has(self, key: str) -> bool:
        """Return True if get() would return a value for this key."""
        ...

    def delete(self, key: str) -> bool:
        """Delete a specific entry.

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries deleted
        """
        ...

    def count(self) -> int:
        """Count live entries in the cache."""
        ...

    def health_check(self) -> bool:
        """Check if the backend is reachable."""
        ...

    def get_stats(self) -> dict:
        """Get backend statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
