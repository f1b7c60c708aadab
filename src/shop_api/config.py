import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

DEFAULT_INDEX_PATH = Path(__file__).parent / "static" / "index.html"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_key_prefix: str = os.getenv("REDIS_KEY_PREFIX", "shop")

    # Listing defaults
    default_offset: int = int(os.getenv("DEFAULT_OFFSET", "0"))
    default_limit: int = int(os.getenv("DEFAULT_LIMIT", "25"))

    # Root document
    index_path: str = os.getenv("INDEX_PATH", str(DEFAULT_INDEX_PATH))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def cors_origin_list(self) -> list[str]:
        """Split CORS_ORIGINS into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.default_offset < 0:
            raise ValueError("DEFAULT_OFFSET must be 0 or greater")

        if self.default_limit < 1:
            raise ValueError("DEFAULT_LIMIT must be 1 or greater")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
