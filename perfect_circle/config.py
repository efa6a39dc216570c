"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Stats persistence for the command line front end
    stats_path: Path = Path.home() / ".perfect_circle" / "stats.json"
    stats_key: str = "perfectCircleStats"

    # Gestures need more samples than this to be scored
    min_points: int = 10

    model_config = SettingsConfigDict(
        env_prefix="PERFECT_CIRCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
