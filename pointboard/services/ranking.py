"""Whole-set rank reconciliation.

Ranks are dense positions (1..N) in the order: most points first, then the
earliest created participant, then the lowest id. The secondary keys never
change for a participant, so repeated passes over unchanged totals give the
same assignment.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, Tuple

from sqlmodel import Session, select

from ..models import Participant

logger = logging.getLogger(__name__)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def rank_key(participant: Participant) -> Tuple[int, datetime, int]:
    return (
        -participant.total_points,
        _naive_utc(participant.created_at),
        participant.id,
    )


def compute_ranks(participants: Iterable[Participant]) -> Dict[int, int]:
    """Map participant id to its dense rank."""

    ordered = sorted(participants, key=rank_key)
    return {participant.id: position for position, participant in enumerate(ordered, start=1)}


class RankReconciler:
    """Recomputes every participant's rank from the current totals."""

    def reconcile(self, session: Session) -> Dict[int, int]:
        """Rewrite ranks inside the caller's transaction and return the assignment."""

        statement = select(Participant).execution_options(populate_existing=True)
        participants = list(session.exec(statement).all())
        ranks = compute_ranks(participants)

        changed = 0
        for participant in participants:
            rank = ranks[participant.id]
            if participant.rank != rank:
                participant.rank = rank
                session.add(participant)
                changed += 1

        if changed:
            session.flush()
        logger.debug("Reconciled %d participants, %d ranks changed", len(participants), changed)
        return ranks


__all__ = ["RankReconciler", "compute_ranks", "rank_key"]
