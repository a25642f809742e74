"""
PlayerSession for managing one player's state during a round.

Routes each submission through the pre-checks, the path verifier and the
scoring engine, and threads the player's combo state from one submission to
the next. A session is the single writer of its combo state; callers must
serialize a player's submissions.
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..alphabets import get_provider
from ..board.models import Grid
from ..scoring import ComboState, advance_combo, decay_combo, reset_combo, score_word
from ..verifiers import find_path, precheck_word
from .models import RejectReason, SubmissionResult


log = logging.getLogger("lexiclash.round")


class PlayerSession(BaseModel):
    """
    One player's round state.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name for the player
        language: Language tag of the round
        min_word_length: Minimum accepted word length in graphemes
        found_words: Accepted words in normalized form
        combo: Current combo state
        score: Points earned this round
        best_combo: Highest combo level reached this round
        history: Every submission, in order
    """

    player_id: str
    name: str = ""
    language: str = "en"
    min_word_length: int = 2
    found_words: List[str] = Field(default_factory=list)
    combo: ComboState = Field(default_factory=ComboState)
    score: int = 0
    best_combo: int = 0
    history: List[SubmissionResult] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Set default name if not provided."""
        if not self.name:
            self.name = f"Player {self.player_id}"

    def start_round(self) -> None:
        """Clear words, score and combo for a new round."""
        self.found_words = []
        self.combo = reset_combo()
        self.score = 0
        self.best_combo = 0
        self.history = []

    def submit(
        self,
        word: str,
        grid: Grid,
        now: float,
        auto_validated: bool = True,
    ) -> SubmissionResult:
        """
        Submit a word found on the grid.

        The word is scored at the combo level in effect when it arrives
        (after any decay), then the combo advances. Any rejection resets the
        combo.

        Args:
            word: The submitted word
            grid: The round's grid
            now: Submission time in seconds
            auto_validated: Whether acceptance counts towards the combo streak

        Returns:
            SubmissionResult describing the outcome
        """
        provider = get_provider(self.language)
        self.combo = decay_combo(self.combo, now)

        check = precheck_word(word, self.language, self.min_word_length, self.found_words)
        if not check.valid:
            return self._reject(word, now, check.code)

        path = find_path(word, grid, self.language)
        if path is None:
            return self._reject(word, now, "NOT_ON_BOARD")

        normalized = "".join(provider.normalize_word(word))
        scored_at = self.combo.level
        word_score = score_word(normalized, scored_at)
        self.combo = advance_combo(self.combo, now, auto_validated)
        self.best_combo = max(self.best_combo, self.combo.level)
        self.score += word_score.total
        self.found_words.append(normalized)

        result = SubmissionResult(
            player_id=self.player_id,
            word=provider.display_word(word),
            status="accepted",
            submitted_at=now,
            path=path,
            score=word_score,
            combo_level=scored_at,
            new_combo_level=self.combo.level,
        )
        self.history.append(result)
        log.debug(
            "%s accepted %r for %d point(s), combo %d -> %d",
            self.player_id, result.word, word_score.total, scored_at, self.combo.level,
        )
        return result

    def _reject(self, word: str, now: float, reason: Optional[RejectReason]) -> SubmissionResult:
        self.combo = reset_combo()
        result = SubmissionResult(
            player_id=self.player_id,
            word=word,
            status="rejected",
            reason=reason,
            submitted_at=now,
        )
        self.history.append(result)
        log.debug("%s rejected %r (%s)", self.player_id, word, reason)
        return result

    def get_state(self) -> Dict:
        """
        Get the current player state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "player_id": self.player_id,
            "name": self.name,
            "score": self.score,
            "words_found": len(self.found_words),
            "combo_level": self.combo.level,
            "best_combo": self.best_combo,
        }
