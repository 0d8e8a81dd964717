"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="POSTBOARD_",
        extra="ignore",
    )

    app_name: str = "Postboard"
    secret_key: str = "change-me-to-a-long-random-secret-value"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./postboard.db"
    seed_demo_data: bool = True

    # Tokens
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    token_leeway_seconds: int = 0

    allowed_origins: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
