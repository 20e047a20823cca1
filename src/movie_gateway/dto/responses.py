"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class GenresResponse(BaseModel):
    """Response DTO for the genre list."""

    genres: list[Any] = Field(default_factory=list, description="Upstream genre objects")


class SuccessResponse(BaseModel):
    """Response DTO for favorites mutations."""

    success: bool = Field(..., description="Whether the operation succeeded")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")


class StatsResponse(BaseModel):
    """Response DTO for gateway statistics."""

    cache: dict[str, Any] = Field(..., description="Cache backend statistics")
    performance: dict[str, float | int] = Field(..., description="Hit/miss and upstream counters")
