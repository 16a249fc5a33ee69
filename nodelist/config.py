"""
Configuration management using Pydantic Settings.

Environment variables:
- NODELIST_MAX_LINE_LEN: Longest line (in characters) kept by create_list
- NODELIST_LONG_LINE_POLICY: "truncate" or "reject" for longer lines
- NODELIST_ENCODING: Encoding used to decode bytes payloads
- NODELIST_LOG_LEVEL: Level applied by configure_logging
"""
from __future__ import annotations

import codecs
import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NODELIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Line reading
    max_line_len: int = Field(default=256, gt=0)
    long_line_policy: Literal["truncate", "reject"] = "truncate"
    encoding: str = "utf-8"

    # Logging
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``settings.log_level`` to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
