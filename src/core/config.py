"""Application settings, loaded from environment variables (GAMEROOM_*) or explicit kwargs."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GAMEROOM_")

    database_url: str = "sqlite:///gameroom.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
