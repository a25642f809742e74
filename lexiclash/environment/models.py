"""
Pydantic models for the round harness.

This module contains the configuration and result models used by GameRound
and PlayerSession. The logic classes live in their respective files.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from ..board.difficulty import DEFAULT_DIFFICULTY, MAX_TIMER, MIN_TIMER, get_difficulty
from ..board.models import Cell
from ..scoring.models import WordScore


# Type aliases
SubmissionStatus = Literal["accepted", "rejected"]
RejectReason = Literal["WORD_TOO_SHORT", "INVALID_CHARACTERS", "ALREADY_FOUND", "NOT_ON_BOARD"]


class RoundConfig(BaseModel):
    """
    Configuration for one round.

    Board size comes from `rows`/`cols` when both are given, otherwise from
    the difficulty preset.
    """
    language: str = "en"
    difficulty: str = DEFAULT_DIFFICULTY
    rows: Optional[int] = Field(default=None, ge=1)
    cols: Optional[int] = Field(default=None, ge=1)
    duration_seconds: Optional[int] = Field(default=None, ge=MIN_TIMER, le=MAX_TIMER)
    min_word_length: int = Field(default=2, ge=2)
    words_to_embed: List[str] = Field(default_factory=list)
    players: List[str] = Field(default_factory=lambda: ["Player 1"])
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _resolve_board(self) -> "RoundConfig":
        preset = get_difficulty(self.difficulty)
        if self.rows is None or self.cols is None:
            self.rows, self.cols = preset.rows, preset.cols
        if self.duration_seconds is None:
            self.duration_seconds = preset.timer_seconds
        return self

    @property
    def num_players(self) -> int:
        """Number of players (derived from the players list)."""
        return len(self.players)


class SubmissionResult(BaseModel):
    """Outcome of one word submission."""
    player_id: str
    word: str
    status: SubmissionStatus
    reason: Optional[RejectReason] = None
    submitted_at: float
    path: List[Cell] = Field(default_factory=list)
    score: WordScore = Field(default_factory=WordScore)
    combo_level: int = 0  # level the word was scored at
    new_combo_level: int = 0

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"


class PlayerResult(BaseModel):
    """End-of-round standing for one player."""
    player_id: str
    name: str
    score: int = 0
    words: List[str] = Field(default_factory=list)
    best_combo: int = 0


class RoundResult(BaseModel):
    """Result of a complete round."""
    config: RoundConfig
    grid: List[List[str]] = Field(default_factory=list)
    embedded_words: List[str] = Field(default_factory=list)
    leaderboard: List[PlayerResult] = Field(default_factory=list)
    submissions: List[SubmissionResult] = Field(default_factory=list)
    winner: Optional[str] = None
