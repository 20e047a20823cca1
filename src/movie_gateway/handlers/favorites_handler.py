"""HTTP handlers for per-user favorites."""

from typing import Any

from fastapi import HTTPException, status

from movie_gateway.dto import FavoriteMovieRequest, SuccessResponse
from movie_gateway.errors import FavoritesStoreError
from movie_gateway.services import FavoritesService


class FavoritesHandler:
    """HTTP handlers for favorites.

    A corrupt favorites document surfaces as 500 and is left untouched on
    disk for an operator to repair.
    """

    def __init__(self, favorites_service: FavoritesService) -> None:
        self._favorites = favorites_service

    async def list_favorites(self, user_id: str) -> list[dict[str, Any]]:
        """Handle GET /favorites/{user_id} requests."""
        try:
            return await self._favorites.list_favorites(user_id)
        except FavoritesStoreError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not read favorites: {e}",
            ) from e

    async def add_favorite(self, user_id: str, movie: FavoriteMovieRequest) -> SuccessResponse:
        """Handle POST /favorites/{user_id} requests."""
        try:
            await self._favorites.add_favorite(user_id, movie.model_dump())
        except FavoritesStoreError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not save favorite: {e}",
            ) from e
        return SuccessResponse(success=True)

    async def remove_favorite(self, user_id: str, movie_id: str) -> SuccessResponse:
        """Handle DELETE /favorites/{user_id}/{movie_id} requests."""
        try:
            await self._favorites.remove_favorite(user_id, movie_id)
        except FavoritesStoreError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Could not remove favorite: {e}",
            ) from e
        return SuccessResponse(success=True)
