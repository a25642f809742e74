"""Board generation for LexiClash."""

from .models import Cell, Grid, Placement, GenerationResult, GeneratorSettings
from .grid import DIRECTIONS, neighbors, is_adjacent, render_grid
from .generator import generate, generate_grid
from .difficulty import (
    Difficulty,
    DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    MIN_TIMER,
    MAX_TIMER,
    get_difficulty,
    board_size,
    recommended_timer,
)

__all__ = [
    # Models
    "Cell",
    "Grid",
    "Placement",
    "GenerationResult",
    "GeneratorSettings",
    # Grid utilities
    "DIRECTIONS",
    "neighbors",
    "is_adjacent",
    "render_grid",
    # Generation
    "generate",
    "generate_grid",
    # Difficulty presets
    "Difficulty",
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "MIN_TIMER",
    "MAX_TIMER",
    "get_difficulty",
    "board_size",
    "recommended_timer",
]
