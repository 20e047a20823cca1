"""JSON-file implementation of FavoritesStore.

The whole store is a single JSON object mapping user id to a list of movie
objects. Every operation loads the full document; every mutation rewrites it.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from movie_gateway.config import settings
from movie_gateway.errors import FavoritesStoreError

logger = logging.getLogger(__name__)


def same_movie(movie: dict[str, Any], movie_id: Any) -> bool:
    """Identifiers compare as strings, so 42 and "42" name the same movie."""
    return str(movie.get("id")) == str(movie_id)


class JsonFavoritesRepository:
    """Whole-file JSON favorites store with a single writer.

    This class satisfies the FavoritesStore protocol through structural
    typing - no explicit inheritance needed.

    Mutations hold one ``asyncio.Lock`` across load, merge and write, so two
    concurrent upserts can no longer both read the old document and drop each
    other's change. Writes go through a temporary file and ``os.replace``,
    which lets readers skip the lock: they always see a complete document.

    Only one repository instance may write a given path.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the favorites repository.

        Args:
            path: Location of the JSON document. Defaults to settings.
        """
        self._path = Path(path or settings.favorites_path)
        self._lock = asyncio.Lock()

    @classmethod
    def create(cls, path: str | Path | None = None) -> "JsonFavoritesRepository":
        """Factory method to create JsonFavoritesRepository with defaults."""
        return cls(path=path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, list[dict[str, Any]]]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise FavoritesStoreError(f"Favorites file {self._path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise FavoritesStoreError(
                f"Favorites file {self._path} must contain a JSON object, got {type(data).__name__}"
            )

        for user_id, movies in data.items():
            if not isinstance(movies, list) or not all(isinstance(movie, dict) for movie in movies):
                raise FavoritesStoreError(
                    f"Favorites for user {user_id!r} in {self._path} must be a list of objects"
                )
        return data

    def _write(self, data: dict[str, list[dict[str, Any]]]) -> None:
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    async def _load(self) -> dict[str, list[dict[str, Any]]]:
        return await asyncio.to_thread(self._read)

    async def _save(self, data: dict[str, list[dict[str, Any]]]) -> None:
        await asyncio.to_thread(self._write, data)

    async def list(self, user_id: str) -> list[dict[str, Any]]:
        """Return the user's favorites.

        Args:
            user_id: The user identifier

        Returns:
            The user's movies, or an empty list if none are stored

        Raises:
            FavoritesStoreError: If the persisted document is corrupt
        """
        data = await self._load()
        return list(data.get(user_id, []))

    async def upsert(self, user_id: str, movie: dict[str, Any]) -> None:
        """Merge a movie into the user's list by id.

        An existing entry with the same id is replaced in place; otherwise the
        movie is appended. Untouched entries keep their order.

        Args:
            user_id: The user identifier
            movie: Movie object with an ``id`` field
        """
        async with self._lock:
            data = await self._load()
            movies = data.get(user_id, [])

            for index, existing in enumerate(movies):
                if same_movie(existing, movie["id"]):
                    movies[index] = movie
                    break
            else:
                movies.append(movie)

            data[user_id] = movies
            await self._save(data)

        logger.info("Saved favorite %s for user %s", movie["id"], user_id)

    async def remove(self, user_id: str, movie_id: str) -> None:
        """Drop every entry whose id matches movie_id.

        Args:
            user_id: The user identifier
            movie_id: Identifier to remove, compared as a string
        """
        async with self._lock:
            data = await self._load()
            movies = data.get(user_id, [])
            data[user_id] = [movie for movie in movies if not same_movie(movie, movie_id)]
            await self._save(data)

        logger.info("Removed favorite %s for user %s", movie_id, user_id)
