"""Favorites storage protocol.

Defines the interface for persisted per-user favorite-movie lists.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FavoritesStore(Protocol):
    """Protocol for favorites persistence backends.

    Movies are plain JSON objects that carry at least an ``id`` field.
    Within one user's list, ids are unique (compared as strings).
    """

    async def list(self, user_id: str) -> list[dict[str, Any]]:
        """Return the user's favorites, or an empty list if there are none."""
        ...

    async def upsert(self, user_id: str, movie: dict[str, Any]) -> None:
        """Insert a movie or replace the entry with the same id (last write wins)."""
        ...

    async def remove(self, user_id: str, movie_id: str) -> None:
        """Remove every entry whose id matches movie_id."""
        ...
