"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract and the minimal
upstream payload schemas. They are used for request/response validation
and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import FavoriteMovieRequest
from .responses import (
    GenresResponse,
    HealthCheckResponse,
    StatsResponse,
    SuccessResponse,
)
from .upstream import DiscoverPayload, GenreListPayload

__all__ = [
    "FavoriteMovieRequest",
    "GenresResponse",
    "SuccessResponse",
    "HealthCheckResponse",
    "StatsResponse",
    "DiscoverPayload",
    "GenreListPayload",
]
