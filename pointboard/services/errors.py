"""Domain errors raised by the leaderboard services."""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base class for recoverable leaderboard failures.

    ``message`` is safe to show to end users.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidNameError(LeaderboardError):
    """Participant name is empty, whitespace-only or too long."""


class DuplicateNameError(LeaderboardError):
    """A participant with the same trimmed name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"User '{name}' already exists")
        self.name = name


class NotFoundError(LeaderboardError):
    """No participant has the requested identifier."""

    def __init__(self, participant_id: object) -> None:
        super().__init__("User not found")
        self.participant_id = participant_id


class ReconciliationError(LeaderboardError):
    """Rank reconciliation kept failing after all retry attempts."""


__all__ = [
    "DuplicateNameError",
    "InvalidNameError",
    "LeaderboardError",
    "NotFoundError",
    "ReconciliationError",
]
