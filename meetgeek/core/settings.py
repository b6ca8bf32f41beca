from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.meetgeek.ai/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MEETGEEK_",
        extra="ignore",
    )

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "WARNING"
    timeout: float = 30.0


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
