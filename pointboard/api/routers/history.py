"""Award history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...services import LeaderboardEngine, LeaderboardError, record_to_dict
from ..dependencies import get_leaderboard, to_http_error

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/history")
def get_history(leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """Most recent awards across all participants."""

    return [record_to_dict(record) for record in leaderboard.recent_history()]


@router.get("/history/{user_id}")
def get_user_history(user_id: int, leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """Most recent awards for one participant."""

    try:
        records = leaderboard.recent_history(participant_id=user_id)
    except LeaderboardError as exc:
        raise to_http_error(exc) from exc
    return [record_to_dict(record) for record in records]


__all__ = ["router"]
