"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Return an integer environment variable, falling back to ``default``."""

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
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
_DATA_DIR = _PROJECT_ROOT / "data"
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{_DATA_DIR / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Leaderboard behaviour ------------------------------------------------------
_DEFAULT_NAMES = [
    "Rahul",
    "Kamal",
    "Sanak",
    "Priya",
    "Amit",
    "Sneha",
    "Rohan",
    "Kavya",
    "Arjun",
    "Meera",
]

SEED_DEFAULTS = _env_bool("SEED_DEFAULTS", True)
DEFAULT_PARTICIPANTS = _split_csv(os.getenv("DEFAULT_PARTICIPANTS")) or _DEFAULT_NAMES

MAX_NAME_LENGTH = _env_int("MAX_NAME_LENGTH", 40)
HISTORY_LIMIT = _env_int("HISTORY_LIMIT", 50)
USER_HISTORY_LIMIT = _env_int("USER_HISTORY_LIMIT", 20)
RECONCILE_MAX_ATTEMPTS = _env_int("RECONCILE_MAX_ATTEMPTS", 3)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


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
]
