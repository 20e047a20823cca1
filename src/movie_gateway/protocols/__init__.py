"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory → Redis, JSON file → database)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from movie_gateway.protocols import CacheStore, FavoritesStore

    # Type hints work with any implementation
    cache: CacheStore = InMemoryCacheRepository(ttl=86400)  # works
    cache: CacheStore = RedisCacheRepository.create()        # also works
    ```
"""

from .cache_store import CacheStore
from .favorites_store import FavoritesStore

__all__ = [
    "CacheStore",
    "FavoritesStore",
]
