"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path.home() / ".shoot_vault"
    timezone: str = "UTC"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="SHOOT_VAULT_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
