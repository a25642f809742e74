"""Data models for board generation."""

import math
from typing import Iterator, List, Literal, NamedTuple, Optional, Sequence, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Cell(NamedTuple):
    """A (row, col) coordinate on the grid."""
    row: int
    col: int


class Grid(BaseModel):
    """
    An immutable R x C letter matrix for one round.

    Every cell holds exactly one grapheme in its normalized (board) form.
    A grid with no rows is the empty grid produced for non-positive
    dimensions.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    cells: Tuple[Tuple[str, ...], ...] = ()

    @field_validator("cells")
    @classmethod
    def _check_cells(cls, cells: Tuple[Tuple[str, ...], ...]) -> Tuple[Tuple[str, ...], ...]:
        if not cells:
            return cells
        width = len(cells[0])
        if width == 0:
            raise ValueError("grid rows must not be empty")
        for r, row in enumerate(cells):
            if len(row) != width:
                raise ValueError(f"row {r} has {len(row)} cells, expected {width}")
            for c, grapheme in enumerate(row):
                if len(grapheme) != 1:
                    raise ValueError(f"cell ({r}, {c}) must hold one grapheme, got {grapheme!r}")
        return cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], language: str) -> "Grid":
        """Build a grid from row sequences; a row may be a plain string."""
        return cls(language=language, cells=tuple(tuple(row) for row in rows))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[str]:
        """Grapheme at (row, col), or None when out of bounds."""
        if self.in_bounds(row, col):
            return self.cells[row][col]
        return None

    def positions(self) -> Iterator[Cell]:
        """Every cell coordinate in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield Cell(r, c)

    def spell(self, path: Sequence[Cell]) -> str:
        """The graphemes along a path, concatenated."""
        return "".join(self.cells[r][c] for r, c in path)

    def to_lists(self) -> List[List[str]]:
        """Plain nested lists, the shape the transport layer serializes."""
        return [list(row) for row in self.cells]

    def render(self, separator: str = " ") -> str:
        """One line per row, graphemes joined by `separator`."""
        return "\n".join(separator.join(row) for row in self.cells)


class Placement(BaseModel):
    """A word committed to the grid during generation."""
    word: str
    mode: Literal["straight", "winding"]
    direction: Optional[Tuple[int, int]] = None  # only for straight placements
    cells: List[Cell] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Output of a generation call: the grid plus embedding metadata."""
    grid: Grid
    placements: List[Placement] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    occupied: Set[Cell] = Field(default_factory=set)  # reporting only
    target_count: int = 0

    @property
    def embedded_words(self) -> List[str]:
        return [p.word for p in self.placements]


class GeneratorSettings(BaseModel):
    """
    Tuning constants for word embedding.

    Attributes:
        density: Cells per embedded word on alphabetic boards
        lower_bound: Minimum embed target on alphabetic boards
        logographic_density: Cells per embedded compound on logographic boards
        logographic_lower_bound: Minimum embed target on logographic boards
        long_compound_share: Share of the target reserved for 3+ grapheme compounds
            when seeding a logographic board from its curated list
        straight_attempts: Random starts tried for straight-line placement
        winding_attempts: Random starts tried for winding placement
        winding_step_budget: Cells visited per winding search before giving up
    """
    density: float = Field(default=3.0, gt=0)
    lower_bound: int = Field(default=4, ge=0)
    logographic_density: float = Field(default=5.0, gt=0)
    logographic_lower_bound: int = Field(default=2, ge=0)
    long_compound_share: float = Field(default=0.2, ge=0, le=1)
    straight_attempts: int = Field(default=100, ge=0)
    winding_attempts: int = Field(default=50, ge=0)
    winding_step_budget: int = Field(default=2000, ge=1)

    def target_count(self, rows: int, cols: int, available: int, logographic: bool = False) -> int:
        """How many of `available` words to try to embed on a rows x cols board."""
        if logographic:
            density, lower_bound = self.logographic_density, self.logographic_lower_bound
        else:
            density, lower_bound = self.density, self.lower_bound
        return min(available, max(lower_bound, math.floor(rows * cols / density)))
