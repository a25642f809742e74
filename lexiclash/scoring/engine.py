"""
Scoring engine: word points and combo streak transitions.

Scoring formula:
    base        = max(length - 1, 1)
    combo_bonus = floor(min(level - 2, 8) * length_factor(length))   (0 for level <= 2)
    total       = base + combo_bonus

The length factor grows steeply with word length, so a combo built from
short repeated words earns almost nothing.

Combo transitions use a window that grows with the current level:
    window = min(3s + level * 1s, 10s)
An auto-validated acceptance inside the window raises the level by one,
outside it the level drops to 0. Without a new acceptance the streak expires
once the window has elapsed.
"""

import math
from typing import Dict, Iterable, Optional

from ..alphabets import get_provider
from .models import ComboState, PlayerScore, WordScore


# Combo levels at or below this earn no bonus
COMBO_BONUS_THRESHOLD = 2
# Highest level contribution counted towards the bonus
COMBO_LEVEL_CAP = 8

# Combo window, in seconds
COMBO_BASE_WINDOW = 3.0
COMBO_WINDOW_STEP = 1.0
COMBO_WINDOW_CAP = 10.0


def base_score(length: int) -> int:
    """One point per grapheme beyond the first, minimum 1. An empty word scores 0."""
    if length <= 0:
        return 0
    return max(length - 1, 1)


def length_factor(length: int) -> float:
    """Share of the combo level a word of this length converts into bonus points."""
    if length <= 3:
        return 0.1
    if length == 4:
        return 0.3
    if length == 5:
        return 0.7
    if length == 6:
        return 1.0
    return 1.5


def combo_bonus(combo_level: int, length: int) -> int:
    """Flat bonus for a word of `length` graphemes scored at `combo_level`."""
    if combo_level <= COMBO_BONUS_THRESHOLD or length <= 0:
        return 0
    level_part = min(combo_level - COMBO_BONUS_THRESHOLD, COMBO_LEVEL_CAP)
    return math.floor(level_part * length_factor(length))


def score_word(word: str, combo_level: int = 0) -> WordScore:
    """
    Score an accepted word.

    Args:
        word: The accepted word; length is counted in graphemes
        combo_level: The player's combo level when the word was submitted

    Returns:
        WordScore with base, combo_bonus and total
    """
    length = len(word)
    base = base_score(length)
    bonus = combo_bonus(combo_level, length)
    return WordScore(base=base, combo_bonus=bonus, total=base + bonus)


def combo_window(level: int) -> float:
    """Seconds allowed between acceptances to keep a streak at `level` alive."""
    return min(COMBO_BASE_WINDOW + level * COMBO_WINDOW_STEP, COMBO_WINDOW_CAP)


def combo_expires_at(state: ComboState) -> Optional[float]:
    """When the streak decays if nothing else is accepted, or None with no streak running."""
    if state.last_accept_at is None:
        return None
    return state.last_accept_at + combo_window(state.level)


def advance_combo(state: ComboState, now: float, was_auto_validated: bool = True) -> ComboState:
    """
    Transition the combo state for an accepted word.

    Only auto-validated acceptances take part in streaks; any other
    acceptance leaves the state untouched.

    Args:
        state: Current combo state
        now: Acceptance time in seconds
        was_auto_validated: Whether the word was accepted without manual review

    Returns:
        The new combo state
    """
    if not was_auto_validated:
        return state

    last = state.last_accept_at
    if last is not None and now - last < combo_window(state.level):
        level = state.level + 1
    else:
        level = 0
    return ComboState(level=level, last_accept_at=now)


def decay_combo(state: ComboState, now: float) -> ComboState:
    """Reset the streak if its window elapsed before `now`."""
    expires_at = combo_expires_at(state)
    if expires_at is not None and now >= expires_at:
        return reset_combo()
    return state


def reset_combo() -> ComboState:
    """The empty streak: round start, rejected, duplicate or off-board words."""
    return ComboState()


def calculate_round_scores(
    player_words: Dict[str, Iterable[str]],
    language: Optional[str] = None,
) -> Dict[str, PlayerScore]:
    """
    Total each player's unique words at combo level 0.

    Args:
        player_words: Words accepted per player
        language: When given, words equal after normalization count once

    Returns:
        PlayerScore per player
    """
    provider = get_provider(language) if language else None
    scores: Dict[str, PlayerScore] = {}

    for player, words in player_words.items():
        word_scores: Dict[str, int] = {}
        seen = set()
        for word in words:
            key = "".join(provider.normalize_word(word)) if provider else word
            if key in seen:
                continue
            seen.add(key)
            word_scores[word] = score_word(key).total
        scores[player] = PlayerScore(
            total_score=sum(word_scores.values()),
            word_scores=word_scores,
        )

    return scores
