"""Word verification for LexiClash boards."""

from .path import find_path, is_reachable, index_positions, MIN_PATH_LENGTH
from .precheck import precheck_word, could_be_on_board
from .solver import Trie, build_trie, find_all_words
from .models import PrecheckResult, WORD_TOO_SHORT, INVALID_CHARACTERS, ALREADY_FOUND

__all__ = [
    # Path verification
    "find_path",
    "is_reachable",
    "index_positions",
    "MIN_PATH_LENGTH",
    # Pre-checks
    "precheck_word",
    "could_be_on_board",
    "PrecheckResult",
    "WORD_TOO_SHORT",
    "INVALID_CHARACTERS",
    "ALREADY_FOUND",
    # Solver
    "Trie",
    "build_trie",
    "find_all_words",
]
