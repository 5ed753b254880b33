"""Leaderboard engine: the transaction and locking boundary around the services."""

from __future__ import annotations

import logging
import random
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from ..core import (
    DEFAULT_PARTICIPANTS,
    HISTORY_LIMIT,
    MAX_NAME_LENGTH,
    RECONCILE_MAX_ATTEMPTS,
    USER_HISTORY_LIMIT,
)
from ..models import AwardRecord, Participant
from .awards import AwardProcessor, ClaimResult
from .errors import ReconciliationError
from .history import HistoryLog
from .participants import ParticipantStore
from .ranking import RankReconciler

logger = logging.getLogger(__name__)

_RETRY_BACKOFF_SEC = 0.05

T = TypeVar("T")


class LeaderboardEngine:
    """Entry point for every leaderboard operation.

    Writes (creates, claims, reconciliation passes) run one at a time under a
    process-wide lock, each inside a single database transaction, so a
    reconciliation always reads a consistent set of totals and commits all
    ranks together. Reads only open a session.
    """

    def __init__(
        self,
        db_engine: Engine,
        rng: Optional[random.Random] = None,
        max_name_length: int = MAX_NAME_LENGTH,
        history_limit: int = HISTORY_LIMIT,
        user_history_limit: int = USER_HISTORY_LIMIT,
        reconcile_attempts: int = RECONCILE_MAX_ATTEMPTS,
    ) -> None:
        self.db_engine = db_engine
        self.reconciler = RankReconciler()
        self.processor = AwardProcessor(rng=rng, reconciler=self.reconciler)
        self.max_name_length = max_name_length
        self.history_limit = history_limit
        self.user_history_limit = user_history_limit
        self.reconcile_attempts = max(1, reconcile_attempts)
        self._write_lock = threading.RLock()

    # Sessions ---------------------------------------------------------------

    @contextmanager
    def _session(self) -> Iterator[Session]:
        # Returned objects are used after the session closes.
        with Session(self.db_engine, expire_on_commit=False) as session:
            yield session

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        with self._write_lock, self._session() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def _write(self, operation: Callable[[Session], T], action: str) -> T:
        """Run ``operation`` in a write transaction, retrying transient database errors.

        A failed attempt rolls back completely, so re-running it is safe.
        """

        for attempt in range(1, self.reconcile_attempts + 1):
            try:
                with self._transaction() as session:
                    return operation(session)
            except OperationalError:
                if attempt == self.reconcile_attempts:
                    logger.exception("%s failed after %d attempts", action, attempt)
                    break
                logger.warning("%s attempt %d failed, retrying", action, attempt)
                time.sleep(_RETRY_BACKOFF_SEC * attempt)
        raise ReconciliationError("Rankings could not be updated, try again")

    def _store(self, session: Session) -> ParticipantStore:
        return ParticipantStore(session, max_name_length=self.max_name_length)

    def _history(self, session: Session) -> HistoryLog:
        return HistoryLog(
            session,
            limit=self.history_limit,
            participant_limit=self.user_history_limit,
        )

    # Participants -----------------------------------------------------------

    def create_participant(self, name: str) -> Participant:
        """Create a participant and re-rank so it gets a place on the board."""

        def create(session: Session) -> Participant:
            participant = self._store(session).create_participant(name)
            self.reconciler.reconcile(session)
            return participant

        return self._write(create, "Participant creation")

    def list_participants(self) -> List[Participant]:
        with self._session() as session:
            return self._store(session).list_participants()

    def get_participant(self, participant_id: int) -> Participant:
        with self._session() as session:
            return self._store(session).get_participant(participant_id)

    def bootstrap(self, names: Optional[Iterable[str]] = None) -> List[Participant]:
        """Seed default participants into an empty board and rank them."""

        names = DEFAULT_PARTICIPANTS if names is None else list(names)

        def seed(session: Session) -> List[Participant]:
            created = self._store(session).seed_defaults(names)
            self.reconciler.reconcile(session)
            return created

        return self._write(seed, "Default seeding")

    # Awards -----------------------------------------------------------------

    def claim(self, participant_id: int) -> ClaimResult:
        """Award random points; the award, its record and new ranks commit together."""

        def award(session: Session) -> ClaimResult:
            return self.processor.claim(
                session,
                participant_id,
                store=self._store(session),
                history=self._history(session),
            )

        return self._write(award, "Point claim")

    def reconcile(self) -> Dict[int, int]:
        """Run a standalone reconciliation pass."""

        return self._write(self.reconciler.reconcile, "Rank reconciliation")

    # History ----------------------------------------------------------------

    def recent_history(
        self,
        participant_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[AwardRecord]:
        """Newest awards first, globally or for one existing participant."""

        with self._session() as session:
            history = self._history(session)
            if participant_id is None:
                return history.recent(limit)
            self._store(session).get_participant(participant_id)
            return history.recent_for(participant_id, limit)

    def history_size(self, participant_id: Optional[int] = None) -> int:
        with self._session() as session:
            return self._history(session).count(participant_id)


__all__ = ["LeaderboardEngine"]
