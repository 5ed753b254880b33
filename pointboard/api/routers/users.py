"""Participant endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...services import LeaderboardEngine, LeaderboardError, participant_to_dict
from ..dependencies import get_leaderboard, to_http_error

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users")
def list_users(leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """List participants, highest total first."""

    return [participant_to_dict(user) for user in leaderboard.list_participants()]


@router.post("/users", status_code=201)
def create_user(body: Dict[str, Any], leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """Add a participant with zero points."""

    try:
        user = leaderboard.create_participant(body.get("name"))
    except LeaderboardError as exc:
        raise to_http_error(exc) from exc
    return participant_to_dict(user)


@router.get("/users/{user_id}")
def get_user(user_id: int, leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """Get a single participant."""

    try:
        user = leaderboard.get_participant(user_id)
    except LeaderboardError as exc:
        raise to_http_error(exc) from exc
    return participant_to_dict(user)


__all__ = ["router"]
