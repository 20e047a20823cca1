"""Utility modules for the movie gateway."""

from .cache_keys import (
    QueryParams,
    canonical_query,
    discover_key,
    genres_key,
    movie_key,
    query_pairs,
)

__all__ = [
    "QueryParams",
    "canonical_query",
    "discover_key",
    "genres_key",
    "movie_key",
    "query_pairs",
]
