"""
Configuration management for the response helpers.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

JSON_CONTENT_TYPE = "application/json; utf-8"


class Settings(BaseSettings):
    """Environment-driven settings."""

    model_config = SettingsConfigDict(env_prefix="RESPOND_", case_sensitive=False)

    # Existing consumers match on this exact value, including the bare "utf-8" token.
    json_content_type: str = JSON_CONTENT_TYPE
    error_status: int = 500

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]
