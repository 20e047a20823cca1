"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteMovieRequest(BaseModel):
    """Request DTO for saving a favorite movie.

    Only ``id`` is required; every other field the client sends (title,
    poster path, rating, ...) is stored verbatim.
    """

    model_config = ConfigDict(extra="allow")

    id: int | str = Field(..., description="Movie identifier, unique within a user's list")
