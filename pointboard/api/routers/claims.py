"""Point claim endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...services import LeaderboardEngine, LeaderboardError, participant_to_dict, record_to_dict
from ..dependencies import get_leaderboard, to_http_error

router = APIRouter(prefix="/api", tags=["claims"])


def _parse_user_id(raw: Any) -> int:
    """Accept an integer or a string of digits; anything else is rejected."""

    if raw is None or raw == "":
        raise HTTPException(400, "User ID is required")
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    raise HTTPException(400, "User ID must be an integer")


@router.post("/claim-points")
def claim_points(body: Dict[str, Any], leaderboard: LeaderboardEngine = Depends(get_leaderboard)):
    """Award a random 1-10 points to a participant."""

    user_id = _parse_user_id(body.get("userId"))
    try:
        result = leaderboard.claim(user_id)
    except LeaderboardError as exc:
        raise to_http_error(exc) from exc

    return {
        "user": participant_to_dict(result.participant),
        "pointsAwarded": result.amount,
        "record": record_to_dict(result.record),
        "message": result.message,
    }


__all__ = ["router"]
