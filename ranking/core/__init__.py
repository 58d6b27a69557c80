"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    DEFAULT_PAGE_SIZE,
    LEADERBOARD_SIZE,
    LOG_LEVEL,
    SECRET_KEY,
)
from .database import create_db_engine, ensure_sqlite_directory
from .errors import NotFound, RankingError, StorageError, ValidationError
from .logging import configure_logging
from .time import as_utc, isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "DEFAULT_PAGE_SIZE",
    "LEADERBOARD_SIZE",
    "LOG_LEVEL",
    "NotFound",
    "RankingError",
    "SECRET_KEY",
    "StorageError",
    "ValidationError",
    "as_utc",
    "configure_logging",
    "create_db_engine",
    "ensure_sqlite_directory",
    "isoformat_utc",
    "utcnow",
]
