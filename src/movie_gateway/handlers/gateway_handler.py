"""HTTP handlers for the cached metadata resources.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error mapping.
"""

from typing import Any

from fastapi import HTTPException, status

from movie_gateway.dto import GenresResponse, HealthCheckResponse, StatsResponse
from movie_gateway.errors import InvalidUpstreamShape, UpstreamError
from movie_gateway.services import GatewayService
from movie_gateway.utils import QueryParams


class GatewayHandler:
    """HTTP handlers for genre, discover and movie detail requests.

    Error mapping:
    - UpstreamError (unreachable, bad status, malformed JSON) -> 500
    - InvalidUpstreamShape -> 502

    Example:
        ```python
        handler = GatewayHandler(gateway_service=service)

        @app.get("/genre/movie/list")
        async def genres():
            return await handler.genres()
        ```
    """

    def __init__(self, gateway_service: GatewayService) -> None:
        """Initialize the gateway handler.

        Args:
            gateway_service: The gateway service for business logic (required).
        """
        self._gateway = gateway_service

    async def genres(self) -> GenresResponse:
        """Handle GET /genre/movie/list requests.

        Raises:
            HTTPException: 500 on fetch/parse failure, 502 on shape violation
        """
        try:
            genres = await self._gateway.genres()
        except UpstreamError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not fetch genres: {e}",
            ) from e
        except InvalidUpstreamShape as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Invalid response from TMDb: {e}",
            ) from e
        return GenresResponse(genres=genres)

    async def discover(self, params: QueryParams) -> dict[str, Any]:
        """Handle GET /discover/movie requests.

        Args:
            params: Every query parameter the client sent, repeats included

        Raises:
            HTTPException: 500 on fetch/parse failure, 502 on shape violation
        """
        try:
            return await self._gateway.discover(params)
        except UpstreamError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not fetch discover: {e}",
            ) from e
        except InvalidUpstreamShape as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Invalid response from TMDb: {e}",
            ) from e

    async def movie_detail(self, movie_id: str) -> Any:
        """Handle GET /movie/{id} requests.

        Raises:
            HTTPException: 500 on fetch/parse failure
        """
        try:
            return await self._gateway.movie_detail(movie_id)
        except UpstreamError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not fetch movie detail: {e}",
            ) from e

    async def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests."""
        return StatsResponse(**self._gateway.get_stats())

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the cache backend is unreachable
        """
        if not self._gateway.is_healthy():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Cache backend unreachable",
            )
        return HealthCheckResponse(status="healthy", cache_healthy=True)
