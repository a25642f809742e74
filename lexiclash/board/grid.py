"""Grid adjacency and rendering utilities."""

from typing import List

from .models import Cell, Grid


# 8 directions: up, down, left, right, and 4 diagonals
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def neighbors(cell: Cell, rows: int, cols: int) -> List[Cell]:
    """In-bounds cells sharing an edge or a corner with `cell`."""
    result = []
    for dr, dc in DIRECTIONS:
        r, c = cell.row + dr, cell.col + dc
        if 0 <= r < rows and 0 <= c < cols:
            result.append(Cell(r, c))
    return result


def is_adjacent(a: Cell, b: Cell) -> bool:
    """True if two distinct cells share an edge or a corner."""
    return a != b and abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


def render_grid(grid: Grid, separator: str = " ") -> str:
    """Render the grid to a string, one line per row."""
    return grid.render(separator)
