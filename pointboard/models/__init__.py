"""Database model exports."""

from .award import AwardRecord
from .participant import Participant

__all__ = [
    "AwardRecord",
    "Participant",
]
