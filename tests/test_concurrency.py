import threading

from sqlmodel import Session, SQLModel, create_engine

from pointboard.services import LeaderboardEngine, ParticipantStore

from .conftest import assert_dense_ranks


def _file_engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'board.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    SQLModel.metadata.create_all(engine)
    return engine


def _run_threads(count, target):
    errors = []

    def wrapped(index):
        try:
            target(index)
        except Exception as exc:  # surfaced by the caller's assertion
            errors.append(exc)

    threads = [threading.Thread(target=wrapped, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return errors


def test_concurrent_claims_lose_no_points(tmp_path):
    engine = _file_engine(tmp_path)
    leaderboard = LeaderboardEngine(engine, user_history_limit=1000)
    leaderboard.bootstrap(["Alice", "Bob", "Cara"])
    ids = [p.id for p in leaderboard.list_participants()]

    def worker(index):
        for _ in range(15):
            leaderboard.claim(ids[index % len(ids)])

    assert _run_threads(8, worker) == []
    assert leaderboard.history_size() == 8 * 15

    participants = leaderboard.list_participants()
    assert_dense_ranks(participants)
    for participant in participants:
        awarded = sum(
            r.points_awarded for r in leaderboard.recent_history(participant.id, limit=1000)
        )
        assert participant.total_points == awarded
    engine.dispose()


def test_overlapping_increments_on_separate_sessions(tmp_path):
    """Unsynchronized writers on one row still add up exactly."""
    engine = _file_engine(tmp_path)
    with Session(engine) as session:
        alice = ParticipantStore(session).create_participant("Alice")
        session.commit()
        alice_id = alice.id

    workers, rounds, amount = 8, 25, 3
    start = threading.Barrier(workers)

    def worker(_):
        start.wait()
        for _ in range(rounds):
            with Session(engine) as session:
                ParticipantStore(session).apply_award(alice_id, amount)
                session.commit()

    assert _run_threads(workers, worker) == []

    with Session(engine) as session:
        total = ParticipantStore(session).get_participant(alice_id).total_points
    assert total == workers * rounds * amount
    engine.dispose()
