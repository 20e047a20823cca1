"""Favorites service.

Favorites bypass the response cache and go straight to the persisted store.
"""

from typing import Any

from movie_gateway.protocols import FavoritesStore


class FavoritesService:
    """Per-user favorite-movie lists on top of a FavoritesStore."""

    def __init__(self, store: FavoritesStore) -> None:
        """Initialize the favorites service.

        Args:
            store: Persistence backend (required).
        """
        self._store = store

    @classmethod
    def create(cls, store: FavoritesStore) -> "FavoritesService":
        return cls(store=store)

    async def list_favorites(self, user_id: str) -> list[dict[str, Any]]:
        return await self._store.list(user_id)

    async def add_favorite(self, user_id: str, movie: dict[str, Any]) -> None:
        """Insert or replace a movie by id (last write wins)."""
        if "id" not in movie:
            raise ValueError("Favorite movie must have an 'id'")
        await self._store.upsert(user_id, movie)

    async def remove_favorite(self, user_id: str, movie_id: str) -> None:
        await self._store.remove(user_id, movie_id)

    @property
    def store(self) -> FavoritesStore:
        """Get the underlying store (for testing)."""
        return self._store
