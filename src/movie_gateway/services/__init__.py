"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository / Upstream
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from movie_gateway.repositories import InMemoryCacheRepository
    from movie_gateway.services import GatewayService, UpstreamClient

    gateway = GatewayService.create(
        cache=InMemoryCacheRepository.create(),
        upstream=UpstreamClient.create(),
    )
    ```
"""

from .favorites_service import FavoritesService
from .gateway_service import GatewayService
from .image_proxy import ImageProxyService
from .upstream_client import UpstreamClient
from .validator import ResponseValidator

__all__ = [
    "FavoritesService",
    "GatewayService",
    "ImageProxyService",
    "ResponseValidator",
    "UpstreamClient",
]
