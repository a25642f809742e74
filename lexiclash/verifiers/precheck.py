"""
Optimistic word checks that run before path verification.

These checks let a client reject obviously bad submissions without a round
trip. They never replace the authoritative path check; a word that passes
here may still be rejected by find_path.
"""

from collections import Counter
from typing import Iterable, Optional

from ..alphabets import get_provider
from ..board.models import Grid
from .models import PrecheckResult, WORD_TOO_SHORT, INVALID_CHARACTERS, ALREADY_FOUND


def precheck_word(
    word: str,
    language: str,
    min_length: int = 2,
    found_words: Iterable[str] = (),
) -> PrecheckResult:
    """
    Check length, script and duplicates for a submitted word.

    Args:
        word: The submitted word
        language: Language tag of the round
        min_length: Minimum word length in graphemes
        found_words: Words the player already found this round

    Returns:
        PrecheckResult; `should_submit` is False for every failure
    """
    provider = get_provider(language)
    graphemes = provider.normalize_word(word)

    if len(graphemes) < min_length:
        return PrecheckResult(
            valid=False,
            code=WORD_TOO_SHORT,
            params={"min": min_length},
            should_submit=False,
        )

    if not provider.matches_script(word):
        return PrecheckResult(valid=False, code=INVALID_CHARACTERS, should_submit=False)

    normalized = "".join(graphemes)
    for found in found_words:
        if "".join(provider.normalize_word(found)) == normalized:
            return PrecheckResult(valid=False, code=ALREADY_FOUND, should_submit=False)

    return PrecheckResult(valid=True)


def could_be_on_board(word: str, grid: Optional[Grid], language: Optional[str] = None) -> bool:
    """
    Cheap necessary condition for a word being on the grid.

    True when the grid holds enough of every grapheme the word needs. Without
    a grid there is nothing to check against and the word is let through.
    """
    if not word:
        return False
    if grid is None or grid.is_empty:
        return True

    provider = get_provider(language or grid.language)
    available = Counter(provider.normalize(g) for row in grid.cells for g in row)
    needed = Counter(provider.normalize_word(word))
    return all(available[g] >= count for g, count in needed.items())
