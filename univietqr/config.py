"""Library configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Level of the univietqr logger")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Settings loaded from ``UNIVIETQR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNIVIETQR_",
        env_nested_delimiter="__",
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized settings."""

    return Settings()


settings = get_settings()
