"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan (or up front by create_app)
    - Dependency functions retrieve handlers from request.app.state
    - Clean separation, no global mutable state: the response cache is one
      explicitly constructed instance per app, empty at startup
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from movie_gateway.config import configure_logging, settings
from movie_gateway.handlers import FavoritesHandler, GatewayHandler, ImageHandler
from movie_gateway.protocols import CacheStore
from movie_gateway.repositories import (
    InMemoryCacheRepository,
    JsonFavoritesRepository,
    RedisCacheRepository,
)
from movie_gateway.services import (
    FavoritesService,
    GatewayService,
    ImageProxyService,
    UpstreamClient,
)

logger = logging.getLogger(__name__)


def _from_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_gateway_handler(request: Request) -> GatewayHandler:
    """Dependency injection for GatewayHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    return _from_state(request, "gateway_handler")


def get_favorites_handler(request: Request) -> FavoritesHandler:
    """Dependency injection for FavoritesHandler from app.state."""
    return _from_state(request, "favorites_handler")


def get_image_handler(request: Request) -> ImageHandler:
    """Dependency injection for ImageHandler from app.state."""
    return _from_state(request, "image_handler")


def build_cache() -> CacheStore:
    """Pick the response cache backend from settings."""
    if settings.uses_redis:
        return RedisCacheRepository.create(ttl=settings.cache_ttl)
    return InMemoryCacheRepository.create(ttl=settings.cache_ttl)


def install_services(
    app: FastAPI,
    gateway_service: GatewayService,
    favorites_service: FavoritesService,
    image_proxy: ImageProxyService,
) -> None:
    """Store services and their handlers in app.state."""
    app.state.gateway_service = gateway_service
    app.state.favorites_service = favorites_service
    app.state.image_proxy = image_proxy
    app.state.gateway_handler = GatewayHandler(gateway_service=gateway_service)
    app.state.favorites_handler = FavoritesHandler(favorites_service=favorites_service)
    app.state.image_handler = ImageHandler(image_proxy=image_proxy)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state, unless create_app
    already installed pre-built services (tests do this):
    1. Cache store and upstream client (data access)
    2. Gateway, favorites and image proxy services (business logic)
    3. Handlers (HTTP endpoints)

    Cleanup:
        Closes HTTP clients this lifespan created and removes them from app.state
    """
    configure_logging()

    owned = getattr(app.state, "gateway_service", None) is None
    upstream: UpstreamClient | None = None

    if owned:
        cache = build_cache()
        upstream = UpstreamClient.create()
        install_services(
            app,
            gateway_service=GatewayService.create(cache=cache, upstream=upstream),
            favorites_service=FavoritesService.create(JsonFavoritesRepository.create()),
            image_proxy=ImageProxyService.create(),
        )
        logger.info("Cache backend: %s (ttl=%ss)", cache.get_stats()["backend"], cache.ttl)
        logger.info("Favorites stored at %s", settings.favorites_path)
        if not settings.tmdb_key:
            logger.warning("TMDB_KEY is not set; upstream calls will be rejected")

    logger.info("Movie gateway started")

    yield

    if owned:
        await upstream.close()
        await app.state.image_proxy.close()
        for name in (
            "gateway_handler",
            "favorites_handler",
            "image_handler",
            "gateway_service",
            "favorites_service",
            "image_proxy",
        ):
            delattr(app.state, name)
    logger.info("Movie gateway shut down")


# Type aliases for cleaner dependency injection
GatewayHandlerDep = Annotated[GatewayHandler, Depends(get_gateway_handler)]
FavoritesHandlerDep = Annotated[FavoritesHandler, Depends(get_favorites_handler)]
ImageHandlerDep = Annotated[ImageHandler, Depends(get_image_handler)]
