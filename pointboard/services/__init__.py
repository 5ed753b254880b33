"""Service layer helpers."""

from .awards import AwardProcessor, ClaimResult
from .errors import (
    DuplicateNameError,
    InvalidNameError,
    LeaderboardError,
    NotFoundError,
    ReconciliationError,
)
from .history import HistoryLog, record_to_dict
from .leaderboard import LeaderboardEngine
from .participants import ParticipantStore, normalize_name, participant_to_dict
from .ranking import RankReconciler, compute_ranks

__all__ = [
    "AwardProcessor",
    "ClaimResult",
    "DuplicateNameError",
    "HistoryLog",
    "InvalidNameError",
    "LeaderboardEngine",
    "LeaderboardError",
    "NotFoundError",
    "ParticipantStore",
    "RankReconciler",
    "ReconciliationError",
    "compute_ranks",
    "normalize_name",
    "participant_to_dict",
    "record_to_dict",
]
