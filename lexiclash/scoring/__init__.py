"""Word scoring and combo streaks."""

from .models import WordScore, ComboState, PlayerScore
from .engine import (
    COMBO_BONUS_THRESHOLD,
    COMBO_LEVEL_CAP,
    COMBO_BASE_WINDOW,
    COMBO_WINDOW_STEP,
    COMBO_WINDOW_CAP,
    base_score,
    length_factor,
    combo_bonus,
    score_word,
    combo_window,
    combo_expires_at,
    advance_combo,
    decay_combo,
    reset_combo,
    calculate_round_scores,
)

__all__ = [
    # Models
    "WordScore",
    "ComboState",
    "PlayerScore",
    # Constants
    "COMBO_BONUS_THRESHOLD",
    "COMBO_LEVEL_CAP",
    "COMBO_BASE_WINDOW",
    "COMBO_WINDOW_STEP",
    "COMBO_WINDOW_CAP",
    # Word scores
    "base_score",
    "length_factor",
    "combo_bonus",
    "score_word",
    # Combo transitions
    "combo_window",
    "combo_expires_at",
    "advance_combo",
    "decay_combo",
    "reset_combo",
    # Round totals
    "calculate_round_scores",
]
