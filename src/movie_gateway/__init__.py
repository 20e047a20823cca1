"""Movie Gateway - Caching API gateway for TMDb metadata.

This package provides a layered architecture for the gateway:

Layers:
    - protocols: Interface contracts (CacheStore, FavoritesStore)
    - repositories: Storage implementations (memory, Redis, JSON file)
    - services: Business logic (read-through cache, upstream client,
      validator, image proxy, favorites)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts, upstream schemas)
    - entities: Domain models (internal)

Usage:
    ```python
    from movie_gateway.repositories import InMemoryCacheRepository
    from movie_gateway.services import GatewayService, UpstreamClient

    gateway = GatewayService.create(
        cache=InMemoryCacheRepository.create(),
        upstream=UpstreamClient.create(),
    )
    ```

For HTTP API:
    ```python
    from movie_gateway.api.app import app
    ```
"""

from movie_gateway.config import get_redis_client, settings
from movie_gateway.dto import FavoriteMovieRequest
from movie_gateway.entities import GatewayMetrics
from movie_gateway.errors import (
    FavoritesStoreError,
    GatewayError,
    InvalidUpstreamShape,
    UpstreamError,
    UpstreamMalformed,
    UpstreamStatusError,
    UpstreamUnreachable,
)
from movie_gateway.handlers import FavoritesHandler, GatewayHandler, ImageHandler
from movie_gateway.protocols import CacheStore, FavoritesStore
from movie_gateway.repositories import (
    InMemoryCacheRepository,
    JsonFavoritesRepository,
    RedisCacheRepository,
)
from movie_gateway.services import (
    FavoritesService,
    GatewayService,
    ImageProxyService,
    ResponseValidator,
    UpstreamClient,
)

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "FavoritesStore",
    # Services (business logic)
    "GatewayService",
    "UpstreamClient",
    "ResponseValidator",
    "ImageProxyService",
    "FavoritesService",
    # Handlers (HTTP)
    "GatewayHandler",
    "FavoritesHandler",
    "ImageHandler",
    # Repositories (data access)
    "InMemoryCacheRepository",
    "RedisCacheRepository",
    "JsonFavoritesRepository",
    # Entities (domain models)
    "GatewayMetrics",
    # DTOs (API contracts)
    "FavoriteMovieRequest",
    # Errors
    "GatewayError",
    "UpstreamError",
    "UpstreamUnreachable",
    "UpstreamMalformed",
    "UpstreamStatusError",
    "InvalidUpstreamShape",
    "FavoritesStoreError",
]
