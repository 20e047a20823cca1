"""Schemas for the parts of upstream payloads the gateway relies on.

Only the fields the gateway depends on are declared; everything else is
allowed through untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class GenreListPayload(BaseModel):
    """Upstream ``/genre/movie/list`` body."""

    model_config = ConfigDict(extra="allow")

    genres: list[Any]


class DiscoverPayload(BaseModel):
    """Upstream ``/discover/movie`` body."""

    model_config = ConfigDict(extra="allow")

    results: list[Any]
