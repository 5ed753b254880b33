"""Database model for leaderboard participants."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Participant(SQLModel, table=True):
    """Participant identified by display name, holding points and a derived rank."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True)
    total_points: int = 0
    # Derived by the rank reconciler; 0 until the first pass that sees the row.
    rank: int = ORMField(default=0, index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Participant"]
