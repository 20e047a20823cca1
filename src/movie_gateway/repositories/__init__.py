"""Repository layer for data access.

This layer abstracts storage (process memory, Redis, the favorites JSON
document) behind protocol-based interfaces. This enables:
- Easy swapping of implementations (in-memory → Redis)
- Unit testing with fake clocks and mock clients
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from movie_gateway.protocols import CacheStore, FavoritesStore

from .favorites_repository import JsonFavoritesRepository
from .memory_repository import InMemoryCacheRepository
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "FavoritesStore",
    "InMemoryCacheRepository",
    "RedisCacheRepository",
    "JsonFavoritesRepository",
]
