import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream metadata service
    tmdb_key: str = os.getenv("TMDB_KEY", "")
    tmdb_base_url: str = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
    tmdb_language: str = os.getenv("TMDB_LANGUAGE", "ru-RU")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # Image CDN
    tmdb_image_base_url: str = os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org")
    tmdb_image_size: str = os.getenv("TMDB_IMAGE_SIZE", "w500")

    # Cache
    cache_ttl: int = int(os.getenv("CACHE_TTL", "86400"))  # 24 hours default
    redis_url: str | None = os.getenv("REDIS_URL")

    # Favorites
    favorites_path: str = os.getenv("FAVORITES_PATH", "favorites.json")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def uses_redis(self) -> bool:
        """Whether the response cache should live in Redis instead of process memory."""
        return bool(self.redis_url)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL must be a positive number of seconds, got {self.cache_ttl}")

        if self.upstream_timeout <= 0:
            raise ValueError(
                f"UPSTREAM_TIMEOUT must be positive, got {self.upstream_timeout}"
            )

        if not self.tmdb_image_size:
            raise ValueError("TMDB_IMAGE_SIZE must not be empty")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance for the shared response cache."""
    if not settings.redis_url:
        raise RuntimeError("REDIS_URL is not configured")
    return redis.from_url(settings.redis_url, decode_responses=True)
