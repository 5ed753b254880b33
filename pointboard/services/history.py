"""Append-only award history."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import Session, func, select

from ..core import HISTORY_LIMIT, USER_HISTORY_LIMIT, isoformat_utc
from ..models import AwardRecord


def record_to_dict(record: AwardRecord) -> Dict[str, Any]:
    """Serialise an award record to an API-friendly dict."""

    return {
        "id": record.id,
        "userId": record.participant_id,
        "userName": record.participant_name,
        "pointsAwarded": record.points_awarded,
        "timestamp": isoformat_utc(record.timestamp),
    }


def _clamp(limit: Optional[int], cap: int) -> int:
    if limit is None:
        return cap
    return max(0, min(int(limit), cap))


class HistoryLog:
    """Award records bound to one session. Records are only ever inserted."""

    def __init__(
        self,
        session: Session,
        limit: int = HISTORY_LIMIT,
        participant_limit: int = USER_HISTORY_LIMIT,
    ) -> None:
        self.session = session
        self.limit = limit
        self.participant_limit = participant_limit

    def append(self, record: AwardRecord) -> AwardRecord:
        self.session.add(record)
        self.session.flush()
        return record

    def recent(self, limit: Optional[int] = None) -> List[AwardRecord]:
        """Newest records first, across all participants."""

        statement = (
            select(AwardRecord)
            .order_by(AwardRecord.timestamp.desc(), AwardRecord.id.desc())
            .limit(_clamp(limit, self.limit))
        )
        return list(self.session.exec(statement).all())

    def recent_for(self, participant_id: int, limit: Optional[int] = None) -> List[AwardRecord]:
        """Newest records first for a single participant."""

        statement = (
            select(AwardRecord)
            .where(AwardRecord.participant_id == participant_id)
            .order_by(AwardRecord.timestamp.desc(), AwardRecord.id.desc())
            .limit(_clamp(limit, self.participant_limit))
        )
        return list(self.session.exec(statement).all())

    def count(self, participant_id: Optional[int] = None) -> int:
        statement = select(func.count()).select_from(AwardRecord)
        if participant_id is not None:
            statement = statement.where(AwardRecord.participant_id == participant_id)
        return self.session.exec(statement).one()


__all__ = ["HistoryLog", "record_to_dict"]
