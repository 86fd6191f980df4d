"""
Application settings.

Values come from defaults, an optional ``.env`` file, or environment
variables prefixed with ``OCCURRENCE_MAP_``. CLI flags take precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the occurrence map pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="OCCURRENCE_MAP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "gbif-occurrence-map"
    app_env: str = "development"
    debug: bool = False

    species_name: str = "Euphydryas editha"
    limit: int = Field(default=50, gt=0)
    output_path: Path = Path("map.gbif.photos.html")
    overlay_points: int = Field(default=0, ge=0)
    seed: int = 123


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
