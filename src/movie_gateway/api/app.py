from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, StreamingResponse

from movie_gateway.api.dependencies import (
    FavoritesHandlerDep,
    GatewayHandlerDep,
    ImageHandlerDep,
    install_services,
    lifespan,
)
from movie_gateway.config import settings
from movie_gateway.dto import (
    FavoriteMovieRequest,
    GenresResponse,
    HealthCheckResponse,
    StatsResponse,
    SuccessResponse,
)
from movie_gateway.services import FavoritesService, GatewayService, ImageProxyService


def create_app(
    gateway_service: GatewayService | None = None,
    favorites_service: FavoritesService | None = None,
    image_proxy: ImageProxyService | None = None,
) -> FastAPI:
    """Build the gateway application.

    With no arguments the lifespan wires every service from settings. Passing
    all three services installs them up front and the lifespan leaves them
    alone, which is how tests inject mock transports and temporary files.
    """
    app = FastAPI(
        title="Movie Gateway",
        description="Caching gateway for TMDb metadata, images and user favorites",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if gateway_service and favorites_service and image_proxy:
        install_services(app, gateway_service, favorites_service, image_proxy)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness check."""
        return "TMDb proxy is up"

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: GatewayHandlerDep) -> HealthCheckResponse:
        return await handler.health_check()

    @app.get("/stats", response_model=StatsResponse)
    async def stats(handler: GatewayHandlerDep) -> StatsResponse:
        """Cache backend statistics and hit/miss counters."""
        return await handler.get_stats()

    @app.get("/genre/movie/list", response_model=GenresResponse)
    async def genres(handler: GatewayHandlerDep) -> GenresResponse:
        return await handler.genres()

    @app.get("/discover/movie")
    async def discover(request: Request, handler: GatewayHandlerDep) -> Any:
        """Search/browse movies; every query parameter is forwarded upstream."""
        return await handler.discover(request.query_params.multi_items())

    @app.get("/movie/{movie_id}")
    async def movie_detail(movie_id: str, handler: GatewayHandlerDep) -> Any:
        return await handler.movie_detail(movie_id)

    @app.get("/image/{image_path:path}")
    async def image(request: Request, handler: ImageHandlerDep) -> StreamingResponse:
        """Proxy an image from the CDN, rewriting the path to its size tier."""
        return await handler.proxy(request)

    @app.get("/favorites/{user_id}")
    async def list_favorites(user_id: str, handler: FavoritesHandlerDep) -> list[dict[str, Any]]:
        return await handler.list_favorites(user_id)

    @app.post(
        "/favorites/{user_id}",
        response_model=SuccessResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_favorite(
        user_id: str,
        movie: FavoriteMovieRequest,
        handler: FavoritesHandlerDep,
    ) -> SuccessResponse:
        """Insert a favorite, or replace the one with the same id."""
        return await handler.add_favorite(user_id, movie)

    @app.delete("/favorites/{user_id}/{movie_id}", response_model=SuccessResponse)
    async def remove_favorite(
        user_id: str,
        movie_id: str,
        handler: FavoritesHandlerDep,
    ) -> SuccessResponse:
        return await handler.remove_favorite(user_id, movie_id)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "movie_gateway.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
