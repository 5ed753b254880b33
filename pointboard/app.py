"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    DEFAULT_PARTICIPANTS,
    LOG_LEVEL,
    SEED_DEFAULTS,
    engine,
)
from .services import LeaderboardEngine

logger = logging.getLogger(__name__)


def create_app(
    leaderboard: Optional[LeaderboardEngine] = None,
    default_names: Optional[Iterable[str]] = None,
    seed_defaults: bool = SEED_DEFAULTS,
    reset: bool = DB_RESET,
) -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    leaderboard = leaderboard or LeaderboardEngine(engine)
    names = list(DEFAULT_PARTICIPANTS if default_names is None else default_names)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = app.state.leaderboard.db_engine
        if reset:
            SQLModel.metadata.drop_all(db_engine)
        SQLModel.metadata.create_all(db_engine)
        if seed_defaults:
            app.state.leaderboard.bootstrap(names)
        else:
            app.state.leaderboard.reconcile()
        logger.info("Leaderboard ready")
        yield

    app = FastAPI(title="Pointboard API", version="0.1.0", lifespan=lifespan)
    app.state.leaderboard = leaderboard

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pointboard.app:app", host="127.0.0.1", port=5000, reload=True)
