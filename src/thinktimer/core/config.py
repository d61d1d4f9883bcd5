import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "ThinkTimer"
DATABASE_FILE = "thinktimer.db"


def user_data_dir() -> Path:
    """Return the per-user data directory for the current platform."""
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        return Path(base) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / APP_DIR_NAME


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "ThinkTimer"
    debug: bool = False

    # Database
    database_url: str | None = None  # Defaults to a SQLite file in the user data dir
    database_echo: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 34115

    # CORS (the UI shell loads from a local origin)
    cors_origins: list[str] = ["http://localhost:5173", "wails://wails"]

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("sqlite"):
            raise ValueError("DATABASE_URL must point at a SQLite database (sqlite+aiosqlite://...)")
        return v

    @property
    def resolved_database_url(self) -> str:
        """Database URL, falling back to the per-user SQLite file."""
        if self.database_url:
            return self.database_url
        path = user_data_dir() / DATABASE_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+aiosqlite:///{path}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
