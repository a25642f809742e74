"""Data models for scoring."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class WordScore(BaseModel):
    """Points awarded for one accepted word."""
    base: int = 0
    combo_bonus: int = 0
    total: int = 0


class ComboState(BaseModel):
    """
    A player's combo streak.

    Immutable: every transition returns a new state. Owned by exactly one
    player session for the length of one round.

    Attributes:
        level: Current combo level
        last_accept_at: Time in seconds of the last combo-eligible acceptance
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(default=0, ge=0)
    last_accept_at: Optional[float] = None


class PlayerScore(BaseModel):
    """End-of-round totals for one player."""
    total_score: int = 0
    word_scores: Dict[str, int] = Field(default_factory=dict)

    @property
    def word_count(self) -> int:
        return len(self.word_scores)
