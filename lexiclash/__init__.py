"""LexiClash word-search board engine."""

from .alphabets import UnsupportedLanguage, letters, normalize, denormalize_for_display
from .board import Cell, Grid, generate, generate_grid
from .verifiers import find_path, is_reachable
from .scoring import ComboState, WordScore, score_word, advance_combo, decay_combo, reset_combo

__all__ = [
    # Alphabets
    "UnsupportedLanguage",
    "letters",
    "normalize",
    "denormalize_for_display",
    # Board generation
    "Cell",
    "Grid",
    "generate",
    "generate_grid",
    # Path verification
    "find_path",
    "is_reachable",
    # Scoring
    "ComboState",
    "WordScore",
    "score_word",
    "advance_combo",
    "decay_combo",
    "reset_combo",
]
