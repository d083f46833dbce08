"""
Configuration settings for the Round Score Resolver.

Uses Pydantic Settings to load environment variables for logging, the
declared-round guard and where the result artifact is written.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_DECLARED_ROUNDS = 10_000
DEFAULT_OUTPUT_FILENAME = "output.txt"


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Resolver
    max_declared_rounds: int = Field(MAX_DECLARED_ROUNDS, alias="MAX_DECLARED_ROUNDS", ge=1)
    text_encoding: str = Field("utf-8", alias="TEXT_ENCODING")

    # Result artifact
    output_dir: Path = Field(Path("."), alias="OUTPUT_DIR")
    output_filename: str = Field(DEFAULT_OUTPUT_FILENAME, alias="OUTPUT_FILENAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings", "MAX_DECLARED_ROUNDS", "DEFAULT_OUTPUT_FILENAME"]
