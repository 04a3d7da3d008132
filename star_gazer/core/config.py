"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Expected skill application id; requests for other ids are rejected when set
    STAR_GAZER_APP_ID: str | None = Field(default=None)
    STAR_GAZER_LOG_LEVEL: str = Field(default="info")
    STAR_GAZER_LOG_DIR: Path | None = Field(default=None)
    STAR_GAZER_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    # Directory with constellation_info.json / constellation_myth.json overrides
    STAR_GAZER_CONTENT_DIR: Path | None = Field(default=None)

    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()
config = settings


__all__ = ["Settings", "settings", "config"]
