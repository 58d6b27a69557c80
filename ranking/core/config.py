"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc
    if value < minimum:
        raise RuntimeError(f"{name} must be at least {minimum}")
    return value


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Application security -------------------------------------------------------
SECRET_KEY = _require_env("SECRET_KEY")

# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

# uvicorn dev server from app.py
_local_dev_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)

COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN") or None
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")


# Storage --------------------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{_PROJECT_ROOT / 'data' / 'ranking.db'}"
)
DB_RESET = _env_bool("DB_RESET", False)


# Ranking behaviour ----------------------------------------------------------
LEADERBOARD_SIZE = _env_int("LEADERBOARD_SIZE", 10)
DEFAULT_PAGE_SIZE = _env_int("DEFAULT_PAGE_SIZE", 20)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


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
    "SECRET_KEY",
]
