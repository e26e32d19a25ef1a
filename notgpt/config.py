"""Konfiguracja aplikacji ze zmiennych środowiskowych i pliku .env."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ustawienia aplikacji; każde pole można nadpisać zmienną `NOTGPT_*`."""

    model_config = SettingsConfigDict(env_prefix="NOTGPT_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    data_file: Path = Field(Path("data") / "data.txt")
    log_level: str = Field("WARNING")


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Zwraca zapamiętaną instancję ustawień (tworzoną przy pierwszym wywołaniu)."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS
