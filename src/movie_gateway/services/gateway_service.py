"""Cached gateway for the upstream metadata resources.

Every resource follows the same read-through algorithm:

1. Build the cache key from the request.
2. On a hit, return the cached value without contacting upstream.
3. On a miss, fetch from upstream and validate the payload.
4. Cache the (possibly narrowed) payload and return it.

Failures at steps 3 propagate as exceptions and nothing is cached.
"""

import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from movie_gateway.entities import GatewayMetrics
from movie_gateway.errors import InvalidUpstreamShape, UpstreamError
from movie_gateway.protocols import CacheStore
from movie_gateway.services.upstream_client import UpstreamClient
from movie_gateway.services.validator import ResponseValidator
from movie_gateway.utils import QueryParams, discover_key, genres_key, movie_key, query_pairs

logger = logging.getLogger(__name__)


class GatewayService:
    """Core read-through cache orchestration.

    This service depends on the CacheStore PROTOCOL, so the in-memory and
    Redis backends are interchangeable. The cache instance is injected and
    shared by every resource for the lifetime of the process.

    Two concurrent misses for one key both reach upstream; the second
    ``set`` simply overwrites the first with an equivalent payload.

    Example:
        ```python
        service = GatewayService.create(
            cache=InMemoryCacheRepository.create(),
            upstream=UpstreamClient.create(),
        )
        genres = await service.genres()
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        upstream: UpstreamClient,
        validator: ResponseValidator | None = None,
        metrics: GatewayMetrics | None = None,
    ) -> None:
        """Initialize the gateway service.

        Args:
            cache: Response cache backend (required).
            upstream: Client for the metadata service (required).
            validator: Payload shape checker. Defaults to ResponseValidator().
            metrics: Counter sink. Defaults to a fresh GatewayMetrics.
        """
        self._cache = cache
        self._upstream = upstream
        self._validator = validator or ResponseValidator()
        self._metrics = metrics or GatewayMetrics()

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        upstream: UpstreamClient,
    ) -> "GatewayService":
        """Factory method to create GatewayService with default validator and metrics."""
        return cls(cache=cache, upstream=upstream)

    async def _cached_fetch(
        self,
        key: str,
        path: str,
        params: QueryParams | None = None,
        validate: Callable[[Any], Any] | None = None,
    ) -> Any:
        # A cached JSON null is still a hit.
        if self._cache.has(key):
            logger.debug("Cache hit for %s", key)
            self._metrics.record_hit()
            return self._cache.get(key)

        logger.debug("Cache miss for %s", key)
        self._metrics.record_miss()
        self._metrics.record_upstream_call()

        try:
            payload = await self._upstream.get_json(path, params)
        except UpstreamError:
            self._metrics.record_upstream_failure()
            raise

        if validate is not None:
            try:
                payload = validate(payload)
            except InvalidUpstreamShape:
                self._metrics.record_shape_violation()
                raise

        self._cache.set(key, payload)
        return payload

    async def genres(self) -> list[Any]:
        """Return the movie genre list.

        Raises:
            UpstreamError: If the fetch fails
            InvalidUpstreamShape: If ``genres`` is not a sequence
        """
        return await self._cached_fetch(
            genres_key(),
            "/genre/movie/list",
            validate=self._validator.genres,
        )

    async def discover(self, params: QueryParams) -> dict[str, Any]:
        """Return a discover page, keeping upstream pagination metadata.

        Args:
            params: Client query parameters as a mapping or (name, value)
                pairs; repeated names are forwarded to upstream as-is

        Raises:
            UpstreamError: If the fetch fails
            InvalidUpstreamShape: If ``results`` is not a sequence
        """
        logger.debug("Discover query: %s", query_pairs(params))
        return await self._cached_fetch(
            discover_key(params),
            "/discover/movie",
            params=params,
            validate=self._validator.discover,
        )

    async def movie_detail(self, movie_id: str) -> Any:
        """Return the upstream detail object for one movie.

        Raises:
            UpstreamError: If the fetch fails
        """
        return await self._cached_fetch(
            movie_key(movie_id),
            f"/movie/{quote(movie_id, safe='')}",
        )

    def get_stats(self) -> dict:
        """Get gateway statistics.

        Returns:
            Dictionary with cache backend stats and request counters
        """
        return {
            "cache": self._cache.get_stats(),
            "performance": self._metrics.to_dict(),
        }

    def is_healthy(self) -> bool:
        return self._cache.health_check()

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def metrics(self) -> GatewayMetrics:
        return self._metrics
