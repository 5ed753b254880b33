from datetime import datetime, timedelta, timezone

import pytest

from pointboard.models import AwardRecord
from pointboard.services import HistoryLog, NotFoundError, ParticipantStore, record_to_dict

BASE = datetime(2024, 5, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def people(session):
    store = ParticipantStore(session)
    return store.create_participant("Alice"), store.create_participant("Bob")


def _append(history, participant, points, minutes):
    return history.append(
        AwardRecord(
            participant_id=participant.id,
            participant_name=participant.name,
            points_awarded=points,
            timestamp=BASE + timedelta(minutes=minutes),
        )
    )


def test_recent_is_newest_first(session, people):
    alice, bob = people
    history = HistoryLog(session)
    _append(history, alice, 1, 0)
    _append(history, bob, 2, 5)
    _append(history, alice, 3, 2)

    assert [r.points_awarded for r in history.recent()] == [2, 3, 1]


def test_recent_is_bounded(session, people):
    alice, _ = people
    history = HistoryLog(session, limit=3)
    for minute in range(6):
        _append(history, alice, 1 + minute, minute)

    assert [r.points_awarded for r in history.recent()] == [6, 5, 4]
    assert len(history.recent(limit=2)) == 2
    assert len(history.recent(limit=500)) == 3
    assert history.recent(limit=0) == []


def test_recent_for_filters_by_participant(session, people):
    alice, bob = people
    history = HistoryLog(session, participant_limit=2)
    _append(history, alice, 1, 0)
    _append(history, bob, 2, 1)
    _append(history, alice, 3, 2)
    _append(history, alice, 4, 3)

    records = history.recent_for(alice.id)
    assert [r.points_awarded for r in records] == [4, 3]
    assert all(r.participant_id == alice.id for r in records)
    assert history.count() == 4
    assert history.count(bob.id) == 1


def test_record_to_dict(session, people):
    alice, _ = people
    record = _append(HistoryLog(session), alice, 8, 0)
    assert record_to_dict(record) == {
        "id": record.id,
        "userId": alice.id,
        "userName": "Alice",
        "pointsAwarded": 8,
        "timestamp": "2024-05-01T09:30:00Z",
    }


def test_engine_history_for_unknown_participant(leaderboard):
    with pytest.raises(NotFoundError):
        leaderboard.recent_history(participant_id=404)


def test_engine_history_caps(db_engine):
    from pointboard.services import LeaderboardEngine

    leaderboard = LeaderboardEngine(db_engine, history_limit=4, user_history_limit=2)
    alice = leaderboard.create_participant("Alice")
    for _ in range(6):
        leaderboard.claim(alice.id)
    assert len(leaderboard.recent_history()) == 4
    assert len(leaderboard.recent_history(alice.id)) == 2
