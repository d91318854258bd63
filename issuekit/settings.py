"""Runtime settings read from ISSUEKIT_* environment variables."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ISSUEKIT_", case_sensitive=False)

    home_dir: Path | None = None
    plain: bool = Field(default_factory=lambda: "NO_COLOR" in os.environ)
    json_indent: int = 4
    file_mode: int = 0o600
    dir_mode: int = 0o755
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
