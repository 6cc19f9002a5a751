"""Library configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from HTTPPROBLEMS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPPROBLEMS_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )

    # Content type a framework should serve problem bodies with.
    MEDIA_TYPE: str = "application/problem+json"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
