# core/settings.py
from __future__ import annotations

import functools
import logging

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    base_url: str = "http://localhost:8000/api"
    timeout: float = 10.0


class Settings(BaseSettings):
    """
    Portal settings, read from the environment (and .env when present).
    Nested values use a double underscore, e.g. PORTAL_API__BASE_URL.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    api: ApiSettings = ApiSettings()
    log_level: str = "INFO"


@functools.lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
