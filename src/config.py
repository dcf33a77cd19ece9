from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    log_level: str = "WARNING"
    journal_db: str = ":memory:"
    stock_csv: Path | None = None

    model_config = SettingsConfigDict(env_prefix="VENDING_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
