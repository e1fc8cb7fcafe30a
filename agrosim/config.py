"""Engine settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration: all values sourced from env vars or .env file.

    Scoring constants are not settings; see ``agrosim.models.tables``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Crop catalog ────────────────────────────────────────────────────────
    crop_catalog_path: str = "data/crops.json"

    # ── Progression ─────────────────────────────────────────────────────────
    competence_cap: int = 100

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
