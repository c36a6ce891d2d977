"""
Configuration and application state management.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .database import Database
    from .feeds import FeedParser
    from .ingestion import FeedIngestor
    from .scheduler import IngestionScheduler

# Load environment variables
load_dotenv()


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_path(value: str | None) -> Path | None:
    """Parse an optional path from environment variable."""
    return Path(value) if value else None


class Config:
    """Application configuration from environment."""
    DB_PATH: Path = Path(os.getenv("DB_PATH", "./data/tayar.db"))
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Feed ingestion
    # JSON array of {name, url, logoUrl, tags}; built-in list when unset
    FEED_SOURCES_PATH: Path | None = _parse_path(os.getenv("FEED_SOURCES_PATH"))
    FETCH_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT", "10"))  # seconds per feed
    ENABLE_SCHEDULER: bool = _parse_bool(os.getenv("ENABLE_SCHEDULER"), default=True)
    INITIAL_FETCH_DELAY: float = float(os.getenv("INITIAL_FETCH_DELAY", "5"))  # seconds
    # 0 = only the startup run; manual fetches are always available
    REFRESH_INTERVAL_MINUTES: float = float(os.getenv("REFRESH_INTERVAL_MINUTES", "0"))

    # Requests per minute per client IP; 0 disables rate limiting
    RATE_LIMIT_PER_MINUTE: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "120"))

    # The single account the app runs as (no authentication)
    DEFAULT_USERNAME: str = os.getenv("DEFAULT_USERNAME", "testuser")
    DEFAULT_USER_PASSWORD: str = os.getenv("DEFAULT_USER_PASSWORD", "password")
    DEFAULT_USER_EMAIL: str = os.getenv("DEFAULT_USER_EMAIL", "test@example.com")
    DEFAULT_USER_AVATAR: str = os.getenv(
        "DEFAULT_USER_AVATAR",
        "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
    )


config = Config()


class AppState:
    """Shared application state."""
    db: "Database | None" = None
    feed_parser: "FeedParser | None" = None
    ingestor: "FeedIngestor | None" = None
    scheduler: "IngestionScheduler | None" = None


state = AppState()


def get_db() -> "Database":
    """Dependency to get database instance."""
    if not state.db:
        raise HTTPException(status_code=500, detail="Database not initialized")
    return state.db


def get_ingestor() -> "FeedIngestor":
    """Dependency to get the feed ingestor."""
    if not state.ingestor:
        raise HTTPException(status_code=503, detail="Feed ingestion not configured")
    return state.ingestor
