"""
Central configuration loader.
Reads from environment variables (via .env) into typed settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    APP_NAME: str = "My Item Manager"

    # Database
    DATABASE_PATH: Path = Field(
        default=_REPO_ROOT / "data" / "items.db",
        validation_alias="ITEMS_DB_PATH",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # API Server
    SERVER_HOST: str = Field(default="127.0.0.1", validation_alias="SERVER_HOST")
    SERVER_PORT: int = Field(default=8000, validation_alias="SERVER_PORT")
    SERVER_RELOAD: bool = Field(default=False, validation_alias="SERVER_RELOAD")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return (and lazily build) the process-wide settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path:
    """Configured database path; relative paths are taken from the repo root."""
    path = get_settings().DATABASE_PATH
    return path if path.is_absolute() else get_repo_root() / path
