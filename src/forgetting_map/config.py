"""Configuration loading for forgetting-map."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORGETTING_MAP_",
        env_file=".env",
        extra="ignore",
    )

    # Range is checked by ForgettingMap so every source raises NotInitializedError.
    capacity: int = Field(128, description="Maximum number of entries held by a map")
    log_level: str = Field("INFO", description="Root log level for configure_logging")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]
