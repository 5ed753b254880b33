"""Database model for the append-only award history."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class AwardRecord(SQLModel, table=True):
    """Immutable record of a single point award."""

    __tablename__ = "award_record"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    participant_id: int = ORMField(foreign_key="participant.id", index=True)
    # Name as it was when the award happened.
    participant_name: str
    points_awarded: int
    timestamp: datetime = ORMField(default_factory=utcnow, index=True)


__all__ = ["AwardRecord"]
