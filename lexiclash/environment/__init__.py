"""In-process round harness for LexiClash."""

from .models import (
    SubmissionStatus,
    RejectReason,
    RoundConfig,
    SubmissionResult,
    PlayerResult,
    RoundResult,
)
from .player import PlayerSession
from .game import GameRound

__all__ = [
    "SubmissionStatus",
    "RejectReason",
    "RoundConfig",
    "SubmissionResult",
    "PlayerResult",
    "RoundResult",
    "PlayerSession",
    "GameRound",
]
