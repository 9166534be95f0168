"""
Application configuration loaded from environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVER_PREFIX = "postgresql+asyncpg://"


class Settings(BaseSettings):
    """TaskFlow API server configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database (required at runtime, but the server starts without it)
    database_url: Optional[str] = None
    db_pool_size: int = 5

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False

    # Logging
    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("database_url")
    @classmethod
    def _use_async_driver(cls, v: Optional[str]) -> Optional[str]:
        """Accept plain postgres URLs and point them at asyncpg."""
        if not v:
            return None
        for prefix in ("postgresql://", "postgres://"):
            if v.startswith(prefix):
                return _ASYNC_DRIVER_PREFIX + v[len(prefix):]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
