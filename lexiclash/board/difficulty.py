"""Difficulty presets: board size and recommended round timer."""

from typing import Dict, Tuple

from pydantic import BaseModel, Field


class Difficulty(BaseModel):
    """Board dimensions and timer for one difficulty level."""
    name: str
    rows: int = Field(..., ge=1)
    cols: int = Field(..., ge=1)
    timer_seconds: int = Field(..., ge=1)


DIFFICULTIES: Dict[str, Difficulty] = {
    "EASY": Difficulty(name="EASY", rows=5, cols=5, timer_seconds=60),
    "MEDIUM": Difficulty(name="MEDIUM", rows=7, cols=7, timer_seconds=60),
    "HARD": Difficulty(name="HARD", rows=11, cols=11, timer_seconds=120),
}

DEFAULT_DIFFICULTY = "MEDIUM"

DEFAULT_TIMER = 60
MIN_TIMER = 30
MAX_TIMER = 600


def get_difficulty(name: str = DEFAULT_DIFFICULTY) -> Difficulty:
    """
    Look up a difficulty preset by name (case-insensitive).

    Raises:
        ValueError: If the name is not a known preset
    """
    key = name.upper()
    if key not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty '{name}' (expected one of {', '.join(DIFFICULTIES)})")
    return DIFFICULTIES[key]


def board_size(name: str = DEFAULT_DIFFICULTY) -> Tuple[int, int]:
    """(rows, cols) for a difficulty preset."""
    difficulty = get_difficulty(name)
    return difficulty.rows, difficulty.cols


def recommended_timer(name: str) -> int:
    """Round length in seconds for a difficulty, or the default for unknown names."""
    difficulty = DIFFICULTIES.get(name.upper())
    return difficulty.timer_seconds if difficulty else DEFAULT_TIMER
