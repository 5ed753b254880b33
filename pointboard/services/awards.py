"""Random point awards."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from sqlmodel import Session

from ..models import AwardRecord, Participant
from .history import HistoryLog
from .participants import ParticipantStore
from .ranking import RankReconciler

logger = logging.getLogger(__name__)

MIN_AWARD = 1
MAX_AWARD = 10


@dataclass(frozen=True)
class ClaimResult:
    participant: Participant
    record: AwardRecord
    amount: int

    @property
    def message(self) -> str:
        return f"{self.participant.name} earned {self.amount} points!"


class AwardProcessor:
    """Grants a random award, records it and re-ranks the board.

    Runs inside the caller's transaction; nothing is written unless the
    participant exists.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        reconciler: Optional[RankReconciler] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.reconciler = reconciler or RankReconciler()

    def draw(self) -> int:
        return self.rng.randint(MIN_AWARD, MAX_AWARD)

    def claim(
        self,
        session: Session,
        participant_id: int,
        store: Optional[ParticipantStore] = None,
        history: Optional[HistoryLog] = None,
    ) -> ClaimResult:
        store = store or ParticipantStore(session)
        history = history or HistoryLog(session)

        participant = store.get_participant(participant_id)
        amount = self.draw()

        store.apply_award(participant.id, amount)
        session.refresh(participant)

        record = history.append(
            AwardRecord(
                participant_id=participant.id,
                participant_name=participant.name,
                points_awarded=amount,
            )
        )

        self.reconciler.reconcile(session)

        logger.info(
            "Awarded %d points to participant id=%s (total=%d, rank=%d)",
            amount,
            participant.id,
            participant.total_points,
            participant.rank,
        )
        return ClaimResult(participant=participant, record=record, amount=amount)


__all__ = ["AwardProcessor", "ClaimResult", "MAX_AWARD", "MIN_AWARD"]
