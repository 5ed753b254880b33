"""Database engine configuration."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine

from .config import DATABASE_URL


def make_engine(url: str = DATABASE_URL) -> Engine:
    """Create an engine, preparing the data directory for file-backed SQLite."""

    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = make_engine()


__all__ = ["engine", "make_engine"]
