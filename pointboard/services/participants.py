"""Participant storage: creation, lookup, atomic point increments and seeding."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from ..core import MAX_NAME_LENGTH, isoformat_utc
from ..models import Participant
from .errors import DuplicateNameError, InvalidNameError, NotFoundError

logger = logging.getLogger(__name__)

# Largest value a SQLite INTEGER primary key can hold.
MAX_PARTICIPANT_ID = 2**63 - 1


def normalize_name(name: Any, max_length: int = MAX_NAME_LENGTH) -> str:
    """Trim a participant name and check it against the storage rules.

    Comparison elsewhere is exact on the trimmed string, so ``"Alice"`` and
    ``"alice"`` are different participants.
    """

    normalized = name.strip() if isinstance(name, str) else ""
    if not normalized:
        raise InvalidNameError("Name is required")
    if len(normalized) > max_length:
        raise InvalidNameError(f"Name must be {max_length} characters or less")
    return normalized


def _check_id(participant_id: Any) -> None:
    """Reject ids that cannot name a stored participant."""

    if (
        isinstance(participant_id, bool)
        or not isinstance(participant_id, int)
        or not 1 <= participant_id <= MAX_PARTICIPANT_ID
    ):
        raise NotFoundError(participant_id)


def participant_to_dict(participant: Participant) -> Dict[str, Any]:
    """Serialise a participant to an API-friendly dict."""

    return {
        "id": participant.id,
        "name": participant.name,
        "totalPoints": participant.total_points,
        "rank": participant.rank,
        "createdAt": isoformat_utc(participant.created_at),
    }


class ParticipantStore:
    """Participant table access bound to one session.

    The store flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session, max_name_length: int = MAX_NAME_LENGTH) -> None:
        self.session = session
        self.max_name_length = max_name_length

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Participant)).one()

    def find_by_name(self, name: str) -> Participant | None:
        return self.session.exec(select(Participant).where(Participant.name == name)).first()

    def create_participant(self, name: Any) -> Participant:
        """Insert a participant with zero points and an unset rank."""

        normalized = normalize_name(name, self.max_name_length)
        if self.find_by_name(normalized) is not None:
            raise DuplicateNameError(normalized)

        participant = Participant(name=normalized)
        self.session.add(participant)
        try:
            self.session.flush()
        except IntegrityError as exc:
            # Lost a race with another writer on the unique name index; the
            # caller rolls the transaction back.
            raise DuplicateNameError(normalized) from exc

        logger.info("Created participant id=%s name=%r", participant.id, participant.name)
        return participant

    def get_participant(self, participant_id: int) -> Participant:
        _check_id(participant_id)
        participant = self.session.get(Participant, participant_id)
        if participant is None:
            raise NotFoundError(participant_id)
        return participant

    def list_participants(self) -> List[Participant]:
        """Snapshot of all participants, best first."""

        statement = select(Participant).order_by(
            Participant.total_points.desc(),
            Participant.rank.asc(),
            Participant.created_at.asc(),
            Participant.id.asc(),
        )
        return list(self.session.exec(statement).all())

    def apply_award(self, participant_id: int, amount: int) -> None:
        """Add ``amount`` points in a single UPDATE so no increment is lost."""

        if amount <= 0:
            raise ValueError("Award amount must be positive")
        _check_id(participant_id)

        statement = (
            update(Participant)
            .where(Participant.id == participant_id)
            .values(total_points=Participant.total_points + amount)
            .execution_options(synchronize_session=False)
        )
        result = self.session.exec(statement)
        if result.rowcount == 0:
            raise NotFoundError(participant_id)

    def seed_defaults(self, names: Iterable[str]) -> List[Participant]:
        """Create the given participants in order, but only into an empty store."""

        if self.count() > 0:
            return []

        created: List[Participant] = []
        seen = set()
        for raw in names:
            try:
                name = normalize_name(raw, self.max_name_length)
            except InvalidNameError:
                logger.warning("Skipping invalid default participant name %r", raw)
                continue
            if name in seen:
                continue
            seen.add(name)
            created.append(self.create_participant(name))

        if created:
            logger.info("Seeded %d default participants", len(created))
        return created


__all__ = [
    "MAX_PARTICIPANT_ID",
    "ParticipantStore",
    "normalize_name",
    "participant_to_dict",
]
