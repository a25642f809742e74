"""
Board generation with guaranteed-findable words.

Builds a rows x cols grid for a language and tries to embed a list of words
along legal adjacency paths:

1. Straight-line placement: random start, one of 8 directions, every cell
   empty or already holding the identical grapheme.
2. Winding placement (fallback): randomized depth-first search from a random
   start, never reusing a cell of the word's own path.

Words that cannot be placed within their attempt budget are skipped silently.
Every remaining cell is then filled with a random grapheme, so the grid is
always fully populated.
"""

import logging
import random
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from ..alphabets import AlphabetProvider, get_provider
from .grid import DIRECTIONS, neighbors
from .models import Cell, GenerationResult, GeneratorSettings, Grid, Placement


log = logging.getLogger("lexiclash.board")

# Working board: None marks a cell no placement has claimed yet
_Board = List[List[Optional[str]]]


def generate(
    rows: int,
    cols: int,
    language: str,
    words_to_embed: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
    settings: Optional[GeneratorSettings] = None,
) -> GenerationResult:
    """
    Generate a fully populated grid, embedding as many words as the board allows.

    Args:
        rows: Number of grid rows
        cols: Number of grid columns
        language: Language tag selecting the alphabet
        words_to_embed: Optional ranked word list; longest words are placed first
        rng: Random source; a freshly seeded one is created when omitted
        settings: Embedding tuning constants

    Returns:
        GenerationResult with the grid and the placements that succeeded

    Raises:
        UnsupportedLanguage: If the language tag is unknown
    """
    provider = get_provider(language)
    settings = settings or GeneratorSettings()
    if rng is None:
        rng = random.Random()

    if rows <= 0 or cols <= 0:
        log.debug("Non-positive board size %dx%d, returning an empty grid", rows, cols)
        return GenerationResult(grid=Grid(language=language))

    board: _Board = [[None] * cols for _ in range(rows)]
    placements: List[Placement] = []
    skipped: List[str] = []
    occupied: Set[Cell] = set()

    candidates = _prepare_candidates(provider, words_to_embed or [])
    if candidates:
        target = settings.target_count(rows, cols, len(candidates), provider.logographic)
        _embed_words(board, candidates, target, rng, settings, placements, skipped, occupied)
    elif provider.compounds:
        target = _seed_compounds(board, provider, rng, settings, placements, skipped, occupied)
    else:
        target = 0

    _fill_empty_cells(board, provider.letters, rng)

    if skipped:
        log.debug("Could not embed %d word(s): %s", len(skipped), ", ".join(skipped))
    log.debug(
        "Generated %dx%d %s board with %d/%d embedded word(s)",
        rows, cols, language, len(placements), target,
    )

    return GenerationResult(
        grid=Grid(language=language, cells=tuple(tuple(row) for row in board)),
        placements=placements,
        skipped=skipped,
        occupied=occupied,
        target_count=target,
    )


def generate_grid(
    rows: int,
    cols: int,
    language: str,
    words_to_embed: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
    settings: Optional[GeneratorSettings] = None,
) -> Grid:
    """Generate a grid without the embedding metadata."""
    return generate(rows, cols, language, words_to_embed, rng=rng, settings=settings).grid


def _prepare_candidates(provider: AlphabetProvider, words: Sequence[str]) -> List[List[str]]:
    """Normalize words to board graphemes, drop short and duplicate ones, longest first."""
    seen: Set[str] = set()
    candidates: List[List[str]] = []
    for word in words:
        graphemes = provider.clean_word(word)
        key = "".join(graphemes)
        if len(graphemes) < 2 or key in seen:
            continue
        seen.add(key)
        candidates.append(graphemes)
    # Stable sort keeps the caller's ranking among words of equal length
    return sorted(candidates, key=len, reverse=True)


def _embed_words(
    board: _Board,
    candidates: Sequence[List[str]],
    limit: int,
    rng: random.Random,
    settings: GeneratorSettings,
    placements: List[Placement],
    skipped: List[str],
    occupied: Set[Cell],
) -> int:
    """Embed candidates in order until `limit` placements exist. Returns how many were added."""
    added = 0
    for graphemes in candidates:
        if len(placements) >= limit:
            break
        placement = _embed_word(board, graphemes, rng, settings)
        if placement is None:
            skipped.append("".join(graphemes))
            continue
        placements.append(placement)
        occupied.update(placement.cells)
        added += 1
    return added


def _seed_compounds(
    board: _Board,
    provider: AlphabetProvider,
    rng: random.Random,
    settings: GeneratorSettings,
    placements: List[Placement],
    skipped: List[str],
    occupied: Set[Cell],
) -> int:
    """
    Seed a logographic board from the provider's curated compounds.

    Longer compounds get a reserved share of the target and are placed
    first; two-grapheme compounds fill the rest. Returns the target.
    """
    rows, cols = len(board), len(board[0])
    compounds = [provider.clean_word(c) for c in provider.compounds]
    rng.shuffle(compounds)
    long_ones = [c for c in compounds if len(c) >= 3]
    short_ones = [c for c in compounds if len(c) == 2]

    target = settings.target_count(rows, cols, len(compounds), logographic=True)
    long_limit = int(target * settings.long_compound_share)
    _embed_words(board, long_ones, long_limit, rng, settings, placements, skipped, occupied)
    _embed_words(board, short_ones, target, rng, settings, placements, skipped, occupied)
    return target


def _embed_word(
    board: _Board,
    graphemes: List[str],
    rng: random.Random,
    settings: GeneratorSettings,
) -> Optional[Placement]:
    """Try straight placement, then winding placement. Commits and returns the placement."""
    rows, cols = len(board), len(board[0])
    length = len(graphemes)
    word = "".join(graphemes)

    directions = list(DIRECTIONS)
    rng.shuffle(directions)

    if length <= max(rows, cols):
        for _ in range(settings.straight_attempts):
            start = Cell(rng.randrange(rows), rng.randrange(cols))
            for direction in directions:
                cells = _straight_path(board, graphemes, start, direction)
                if cells is not None:
                    _commit(board, graphemes, cells)
                    return Placement(word=word, mode="straight", direction=direction, cells=cells)

    if length <= rows * cols:
        for _ in range(settings.winding_attempts):
            start = Cell(rng.randrange(rows), rng.randrange(cols))
            cells = _winding_path(board, graphemes, start, rng, settings.winding_step_budget)
            if cells is not None:
                _commit(board, graphemes, cells)
                return Placement(word=word, mode="winding", cells=cells)

    return None


def _fits(board: _Board, cell: Cell, grapheme: str) -> bool:
    """A cell accepts a grapheme if it is empty or already holds that grapheme."""
    current = board[cell.row][cell.col]
    return current is None or current == grapheme


def _straight_path(
    board: _Board,
    graphemes: List[str],
    start: Cell,
    direction: Tuple[int, int],
) -> Optional[List[Cell]]:
    """Cells of a straight-line placement, or None if it leaves the board or conflicts."""
    rows, cols = len(board), len(board[0])
    dr, dc = direction
    end_row = start.row + (len(graphemes) - 1) * dr
    end_col = start.col + (len(graphemes) - 1) * dc
    if not (0 <= end_row < rows and 0 <= end_col < cols):
        return None

    cells = []
    for i, grapheme in enumerate(graphemes):
        cell = Cell(start.row + i * dr, start.col + i * dc)
        if not _fits(board, cell, grapheme):
            return None
        cells.append(cell)
    return cells


def _winding_path(
    board: _Board,
    graphemes: List[str],
    start: Cell,
    rng: random.Random,
    step_budget: int,
) -> Optional[List[Cell]]:
    """
    Cells of a winding placement found by randomized DFS, or None.

    The search keeps an explicit stack of shuffled neighbor iterators, one per
    cell on the path, so its depth is not bounded by the recursion limit. The
    visited set is scoped to this search and undone on backtrack; the search
    gives up after `step_budget` cell visits.
    """
    rows, cols = len(board), len(board[0])

    def shuffled_neighbors(cell: Cell) -> Iterator[Cell]:
        options = neighbors(cell, rows, cols)
        rng.shuffle(options)
        return iter(options)

    steps = 1
    if not _fits(board, start, graphemes[0]):
        return None

    path: List[Cell] = [start]
    on_path: Set[Cell] = {start}
    stack: List[Iterator[Cell]] = [shuffled_neighbors(start)]

    while stack:
        if len(path) == len(graphemes):
            return path

        grapheme = graphemes[len(path)]
        for nxt in stack[-1]:
            if nxt in on_path:
                continue
            steps += 1
            if steps > step_budget:
                return None
            if _fits(board, nxt, grapheme):
                path.append(nxt)
                on_path.add(nxt)
                stack.append(shuffled_neighbors(nxt))
                break
        else:
            # Backtrack
            stack.pop()
            on_path.discard(path.pop())

    return None


def _commit(board: _Board, graphemes: List[str], cells: List[Cell]) -> None:
    for grapheme, cell in zip(graphemes, cells):
        board[cell.row][cell.col] = grapheme


def _fill_empty_cells(board: _Board, alphabet: Sequence[str], rng: random.Random) -> None:
    """Assign an independent random grapheme to every unclaimed cell."""
    for row in board:
        for c, grapheme in enumerate(row):
            if grapheme is None:
                row[c] = rng.choice(alphabet)
