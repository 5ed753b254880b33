"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    DEFAULT_PARTICIPANTS,
    HISTORY_LIMIT,
    LOG_LEVEL,
    MAX_NAME_LENGTH,
    RECONCILE_MAX_ATTEMPTS,
    SEED_DEFAULTS,
    USER_HISTORY_LIMIT,
)
from .database import engine, make_engine
from .time import isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "DEFAULT_PARTICIPANTS",
    "HISTORY_LIMIT",
    "LOG_LEVEL",
    "MAX_NAME_LENGTH",
    "RECONCILE_MAX_ATTEMPTS",
    "SEED_DEFAULTS",
    "USER_HISTORY_LIMIT",
    "engine",
    "isoformat_utc",
    "make_engine",
    "utcnow",
]
