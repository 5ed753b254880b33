"""Aggregate API routers."""

from fastapi import APIRouter

from .claims import router as claims_router
from .history import router as history_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    users_router,
    claims_router,
    history_router,
)

__all__ = ["ALL_ROUTERS"]
