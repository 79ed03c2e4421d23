"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    storage_backend: Literal["file", "supabase"] = "file"
    data_dir: Path = Path(".nutritrack")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "food_logs"
    food_table_path: Path | None = None
    interpret_delay_seconds: float = 0.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
