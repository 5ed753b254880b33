import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from pointboard import models  # noqa: F401 - register tables
from pointboard.app import create_app
from pointboard.services import LeaderboardEngine


class ScriptedRandom:
    """Stand-in random source that hands out a fixed sequence of award amounts."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def leaderboard(db_engine, rng):
    return LeaderboardEngine(db_engine, rng=rng)


@pytest.fixture
def client(leaderboard):
    app = create_app(leaderboard=leaderboard, default_names=["Alice", "Bob"], seed_defaults=True, reset=False)
    with TestClient(app) as test_client:
        yield test_client


def assert_dense_ranks(participants):
    ranks = sorted(p.rank for p in participants)
    assert ranks == list(range(1, len(participants) + 1))
    by_rank = sorted(participants, key=lambda p: p.rank)
    totals = [p.total_points for p in by_rank]
    assert totals == sorted(totals, reverse=True)
