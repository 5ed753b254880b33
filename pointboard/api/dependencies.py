"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import HTTPException, Request

from ..services import (
    DuplicateNameError,
    InvalidNameError,
    LeaderboardEngine,
    LeaderboardError,
    NotFoundError,
    ReconciliationError,
)


def get_leaderboard(request: Request) -> LeaderboardEngine:
    """Return the leaderboard engine attached to the running app."""

    return request.app.state.leaderboard


_STATUS_BY_ERROR = (
    (InvalidNameError, 400),
    (DuplicateNameError, 400),
    (NotFoundError, 404),
    (ReconciliationError, 503),
)


def to_http_error(error: LeaderboardError) -> HTTPException:
    """Translate a domain error into the HTTP error shown to clients."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code, error.message)
    return HTTPException(400, error.message)


__all__ = ["get_leaderboard", "to_http_error"]
