"""
Path verification: does a submitted word trace a legal path on the grid?

A legal path starts on any cell holding the word's first grapheme and steps
to one of the up-to-8 adjacent cells for each following grapheme, never
visiting the same cell twice. Graphemes are compared in normalized form only,
so the search itself knows nothing about languages.

A missing path is an expected, frequent outcome and is reported as None or
False, never as an exception. Raw rows that do not form a valid grid are a
miss too.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Set, Union

from pydantic import ValidationError

from ..alphabets import get_provider
from ..board.grid import neighbors
from ..board.models import Cell, Grid


# A path needs at least two cells to spell a word
MIN_PATH_LENGTH = 2

GridLike = Union[Grid, Sequence[Sequence[str]]]


def _resolve_language(grid: GridLike, language: Optional[str]) -> str:
    if language is not None:
        return language
    if isinstance(grid, Grid):
        return grid.language
    raise ValueError("language is required when the grid is not a Grid")


def _as_grid(grid: GridLike, language: str) -> Optional[Grid]:
    """The grid as a Grid, or None when raw rows are ragged or hold multi-grapheme cells."""
    if isinstance(grid, Grid):
        return grid
    try:
        return Grid.from_rows(grid, language)
    except (ValidationError, TypeError):
        return None


def _normalized_cells(grid: Grid, language: str) -> List[List[str]]:
    provider = get_provider(language)
    return [[provider.normalize(g) for g in row] for row in grid.cells]


def index_positions(grid: GridLike, language: Optional[str] = None) -> Dict[str, List[Cell]]:
    """
    Map each normalized grapheme to the cells holding it.

    The map only depends on the grid, so callers checking many words against
    one grid can build it once and pass it to find_path.
    """
    language = _resolve_language(grid, language)
    checked = _as_grid(grid, language)
    positions: Dict[str, List[Cell]] = {}
    if checked is None:
        return positions
    for r, row in enumerate(_normalized_cells(checked, language)):
        for c, grapheme in enumerate(row):
            positions.setdefault(grapheme, []).append(Cell(r, c))
    return positions


def find_path(
    word: str,
    grid: GridLike,
    language: Optional[str] = None,
    positions: Optional[Dict[str, List[Cell]]] = None,
) -> Optional[List[Cell]]:
    """
    Find a path on the grid that spells `word`.

    Args:
        word: The submitted word, in any positional letter form
        grid: Grid to search, or raw rows together with `language`
        language: Language whose normalization applies (defaults to the grid's)
        positions: Optional precomputed map from index_positions

    Returns:
        The cells of the first path found, in word order, or None

    Raises:
        UnsupportedLanguage: If the language tag is unknown
        ValueError: If raw rows are given without a language
    """
    language = _resolve_language(grid, language)
    provider = get_provider(language)

    checked = _as_grid(grid, language)
    if not word or checked is None or checked.is_empty:
        return None

    target = provider.normalize_word(word)
    if len(target) < MIN_PATH_LENGTH or len(target) > checked.rows * checked.cols:
        return None

    cells = _normalized_cells(checked, language)
    if positions is None:
        positions = index_positions(checked, language)

    for start in positions.get(target[0], []):
        path = _search(cells, target, start)
        if path is not None:
            return path
    return None


def is_reachable(word: str, grid: GridLike, language: Optional[str] = None) -> bool:
    """True if `word` traces a legal path on the grid."""
    return find_path(word, grid, language) is not None


def _search(cells: List[List[str]], target: List[str], start: Cell) -> Optional[List[Cell]]:
    """
    DFS from `start` with an explicit stack, so long words cannot exhaust
    the interpreter's recursion limit.

    The stack holds one neighbor iterator per cell on the current path. The
    visited set belongs to this search and is undone on backtrack.
    """
    if cells[start.row][start.col] != target[0]:
        return None

    rows, cols = len(cells), len(cells[0])
    path: List[Cell] = [start]
    visited: Set[Cell] = {start}
    stack: List[Iterator[Cell]] = [iter(neighbors(start, rows, cols))]

    while stack:
        if len(path) == len(target):
            return path

        wanted = target[len(path)]
        for nxt in stack[-1]:
            if nxt not in visited and cells[nxt.row][nxt.col] == wanted:
                path.append(nxt)
                visited.add(nxt)
                stack.append(iter(neighbors(nxt, rows, cols)))
                break
        else:
            # Dead end
            stack.pop()
            visited.discard(path.pop())

    return None
