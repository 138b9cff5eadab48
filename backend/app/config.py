"""
Application configuration using Pydantic Settings.
All config is loaded from environment variables / .env file.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "sticky-notes"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"  # comma-separated
    LOG_LEVEL: str = "INFO"

    # ── Time ─────────────────────────────────────────────
    TIMEZONE: str = "UTC"  # applied to naive datetimes and to the scheduler

    # ── Reminders ────────────────────────────────────────
    REMINDER_BACKEND: str = "apscheduler"  # apscheduler | memory
    SEED_DEMO_NOTES: bool = True

    # ── Push channel (reminder delivery) ─────────────────
    PUSH_API_BASE: str = "https://bot-api.zaloplatforms.com"
    PUSH_BOT_TOKEN: str = ""
    PUSH_CHAT_ID: str = ""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance (singleton)."""
    return Settings()
