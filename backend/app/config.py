"""
backend/app/config.py

Purpose:
    Central settings loading for the match feed backend.

Dependencies:
    - pydantic-settings
    - pathlib
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# Prefer backend/.env, fallback to project-root .env.
_BACKEND_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
_ROOT_ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    BACKEND_CORS_ORIGINS: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Competition selection
    FEED_FALLBACK_MAX_COMPETITIONS: int = 10
    FEED_MIN_ACTIVE_COMPETITIONS: int = 1  # fewer active than this -> fallback list
    FEED_TOP_COMPETITIONS_LIMIT: int = 8

    # Fixture query window around the reference date
    FEED_MATCH_WINDOW_DAYS_BEFORE: int = 1
    FEED_MATCH_WINDOW_DAYS_AFTER: int = 5

    # Match ranking
    FEED_TOP_MATCHES_LIMIT: int = 5

    model_config = {
        "env_file": (str(_BACKEND_ENV_FILE), str(_ROOT_ENV_FILE)),
        "extra": "ignore",
    }


settings = Settings()
