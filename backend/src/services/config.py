"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "basewise.db"
DEFAULT_CHAT_MODEL = "gemini-3-flash-preview"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


class AppConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP port")
    database_path: Path = Field(
        default=DEFAULT_DB_PATH, description="SQLite file holding the notes table"
    )
    gemini_api_key: Optional[str] = Field(
        default=None, description="Credential for the hosted Gemini API"
    )
    chat_model: str = Field(
        default=DEFAULT_CHAT_MODEL, min_length=1, description="Gemini model identifier"
    )
    gemini_api_base: str = Field(
        default=DEFAULT_GEMINI_API_BASE, description="Gemini REST base URL"
    )
    chat_timeout_seconds: Optional[float] = Field(
        default=None,
        description="HTTP timeout for the model call; None waits until completion",
    )
    cors_origins: tuple[str, ...] = Field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = Field(default="INFO")

    @field_validator("database_path", mode="before")
    @classmethod
    def _normalize_db_path(cls, value: str | Path | None) -> Path:
        if value is None or value == "":
            return DEFAULT_DB_PATH
        path = value if isinstance(value, Path) else Path(value)
        return path.expanduser().resolve()

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def _blank_key_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        cleaned = value.strip()
        return cleaned or None

    @field_validator("chat_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("CHAT_TIMEOUT_SECONDS must be positive")
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return tuple(origin.strip() for origin in value.split(",") if origin.strip())
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return level


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load and cache application configuration."""
    api_key = _read_env("GEMINI_API_KEY") or _read_env("GOOGLE_API_KEY")
    timeout = _read_env("CHAT_TIMEOUT_SECONDS")

    return AppConfig(
        host=_read_env("HOST", "0.0.0.0"),
        port=int(_read_env("PORT", "3000")),
        database_path=_read_env("DATABASE_PATH", str(DEFAULT_DB_PATH)),
        gemini_api_key=api_key,
        chat_model=_read_env("CHAT_MODEL", DEFAULT_CHAT_MODEL),
        gemini_api_base=_read_env("GEMINI_API_BASE", DEFAULT_GEMINI_API_BASE),
        chat_timeout_seconds=float(timeout) if timeout else None,
        cors_origins=_read_env("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS)),
        log_level=_read_env("LOG_LEVEL", "INFO"),
    )


def reload_config() -> AppConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = ["AppConfig", "get_config", "reload_config", "PROJECT_ROOT", "DEFAULT_DB_PATH"]
