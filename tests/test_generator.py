"""
Test suite for board generation.

Covers:
- Full coverage: every cell holds one grapheme of the language
- Embedded words are traceable on the finished grid
- Straight and winding placement modes
- Skipped words, empty boards and unsupported languages
- Logographic boards seeded from curated compounds
- Difficulty presets
"""

import random

import pytest
from lexiclash.alphabets import UnsupportedLanguage, get_provider, letters
from lexiclash.board import (
    Cell,
    Grid,
    GeneratorSettings,
    generate,
    generate_grid,
    is_adjacent,
    neighbors,
    render_grid,
    get_difficulty,
    board_size,
    recommended_timer,
)
from lexiclash.verifiers import could_be_on_board, is_reachable


def assert_legal_path(cells):
    """Cells are pairwise distinct and consecutive cells are adjacent."""
    assert len(set(cells)) == len(cells)
    for a, b in zip(cells, cells[1:]):
        assert is_adjacent(a, b)


class TestCoverage:
    """Test cases for grid shape and fill."""

    @pytest.mark.parametrize("language", ["en", "sv", "he", "ja"])
    def test_every_cell_filled(self, language):
        """Without words to embed, every cell holds a grapheme of the language."""
        grid = generate_grid(5, 6, language, rng=random.Random(1))
        provider = get_provider(language)
        # Seeded compounds may use kanji outside the fill letters
        inventory = set(provider.letters) | {g for c in provider.compounds for g in c}
        assert grid.rows == 5
        assert grid.cols == 6
        for row in grid.cells:
            for grapheme in row:
                assert grapheme in inventory

    def test_filled_with_embedded_words(self):
        """Embedded words and fill letters together cover the whole grid."""
        result = generate(4, 4, "en", ["cat", "dog", "bird"], rng=random.Random(3))
        inventory = set(letters("en"))
        assert len(list(result.grid.positions())) == 16
        assert all(g in inventory for row in result.grid.cells for g in row)

    def test_non_rectangular_board(self):
        """Boards need not be square."""
        grid = generate_grid(2, 9, "en", ["house"], rng=random.Random(5))
        assert grid.rows == 2
        assert grid.cols == 9

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (0, 0)])
    def test_non_positive_dimensions(self, rows, cols):
        """Non-positive dimensions give an empty grid."""
        result = generate(rows, cols, "en", ["cat"])
        assert result.grid.is_empty
        assert result.placements == []
        assert render_grid(result.grid) == ""

    def test_unsupported_language(self):
        """An unknown language tag is rejected."""
        with pytest.raises(UnsupportedLanguage):
            generate(4, 4, "xx")

    def test_seeded_generation_is_repeatable(self):
        """The same random source state gives the same board."""
        first = generate_grid(5, 5, "en", ["cat", "house"], rng=random.Random(42))
        second = generate_grid(5, 5, "en", ["cat", "house"], rng=random.Random(42))
        assert first == second

    def test_without_rng(self):
        """A random source is created when none is given."""
        grid = generate_grid(3, 3, "en")
        assert grid.rows == 3


class TestEmbedding:
    """Test cases for embedding words."""

    @pytest.mark.parametrize("seed", range(20))
    def test_single_word_on_small_board(self, seed):
        """CAT on an empty 4x4 board is always placed and traceable."""
        result = generate(4, 4, "en", ["CAT"], rng=random.Random(seed))
        assert result.embedded_words == ["CAT"]
        assert is_reachable("CAT", result.grid)
        assert is_reachable("cat", result.grid)

    @pytest.mark.parametrize("seed", range(20))
    def test_absent_word_is_unreachable(self, seed):
        """A word whose letters the board lacks is not traceable."""
        grid = generate_grid(4, 4, "en", ["CAT"], rng=random.Random(seed))
        if not could_be_on_board("ZEBRA", grid):
            assert not is_reachable("ZEBRA", grid)
        assert not is_reachable("ZEBRAS" * 3, grid)

    @pytest.mark.parametrize("seed", range(10))
    def test_every_placement_is_traceable(self, seed):
        """Every reported placement spells its word along a legal path."""
        words = ["house", "tree", "cat", "dog", "sun", "moon", "river"]
        result = generate(6, 6, "en", words, rng=random.Random(seed))
        assert len(result.placements) > 0
        for placement in result.placements:
            assert result.grid.spell(placement.cells) == placement.word
            assert_legal_path(placement.cells)
            assert is_reachable(placement.word, result.grid)

    def test_longest_word_placed_first(self):
        """Candidates are tried longest first."""
        result = generate(6, 6, "en", ["ox", "elephant", "cat"], rng=random.Random(0))
        assert result.placements[0].word == "ELEPHANT"

    def test_duplicates_and_short_words_dropped(self):
        """Repeated words are embedded once, single letters never."""
        result = generate(5, 5, "en", ["cat", "CAT", "a"], rng=random.Random(2))
        assert result.embedded_words == ["CAT"]
        assert "A" not in result.skipped

    def test_occupied_cells_match_placements(self):
        """The occupied set is the union of placement cells."""
        result = generate(5, 5, "en", ["cat", "house"], rng=random.Random(9))
        expected = {cell for p in result.placements for cell in p.cells}
        assert result.occupied == expected

    def test_straight_placement(self):
        """A word that fits a row is placed in a straight line."""
        result = generate(4, 4, "en", ["CAT"], rng=random.Random(11))
        placement = result.placements[0]
        assert placement.mode == "straight"
        dr, dc = placement.direction
        for i, cell in enumerate(placement.cells):
            assert cell == Cell(placement.cells[0].row + i * dr, placement.cells[0].col + i * dc)

    @pytest.mark.parametrize("seed", range(5))
    def test_winding_placement_for_long_word(self, seed):
        """A word longer than the board's longest line winds through it."""
        result = generate(3, 3, "en", ["ABCDE"], rng=random.Random(seed))
        assert len(result.placements) == 1
        placement = result.placements[0]
        assert placement.mode == "winding"
        assert placement.direction is None
        assert_legal_path(placement.cells)
        assert is_reachable("ABCDE", result.grid)

    def test_very_long_word_does_not_raise(self):
        """A word longer than the recursion limit is placed or skipped, never an error."""
        word = "A" * 1200
        result = generate(40, 40, "en", [word], rng=random.Random(0))
        assert result.grid.rows == 40
        assert result.grid.cols == 40
        if result.placements:
            placement = result.placements[0]
            assert placement.mode == "winding"
            assert result.grid.spell(placement.cells) == word
            assert_legal_path(placement.cells)
        else:
            assert result.skipped == [word]

    def test_word_longer_than_board_is_skipped(self):
        """A word with more letters than cells is skipped silently."""
        result = generate(2, 2, "en", ["ABCDE"], rng=random.Random(0))
        assert result.placements == []
        assert result.skipped == ["ABCDE"]
        assert not result.grid.is_empty

    def test_no_attempts_skips_everything(self):
        """With no attempt budget nothing is embedded, but the grid is still full."""
        settings = GeneratorSettings(straight_attempts=0, winding_attempts=0)
        result = generate(4, 4, "en", ["cat", "dog"], rng=random.Random(0), settings=settings)
        assert result.placements == []
        assert sorted(result.skipped) == ["CAT", "DOG"]
        assert len(list(result.grid.positions())) == 16

    def test_hebrew_word_with_final_letter(self):
        """Hebrew words are embedded in base-letter form and found from any form."""
        result = generate(4, 4, "he", ["שלום"], rng=random.Random(4))
        assert result.embedded_words == ["שלומ"]
        assert "ם" not in "".join("".join(row) for row in result.grid.cells)
        assert is_reachable("שלום", result.grid)
        assert is_reachable("שלומ", result.grid)

    def test_swedish_word(self):
        """Swedish letters outside A-Z are embedded."""
        result = generate(4, 4, "sv", ["blå"], rng=random.Random(6))
        assert result.embedded_words == ["BLÅ"]
        assert is_reachable("blå", result.grid)


class TestTargetCount:
    """Test cases for the embedding target."""

    def test_alphabetic_target(self):
        """Roughly one word per three cells, at least four."""
        settings = GeneratorSettings()
        assert settings.target_count(4, 4, 10) == 5
        assert settings.target_count(2, 2, 10) == 4
        assert settings.target_count(7, 7, 3) == 3

    def test_logographic_target(self):
        """Logographic boards aim for one compound per five cells, at least two."""
        settings = GeneratorSettings()
        assert settings.target_count(5, 5, 50, logographic=True) == 5
        assert settings.target_count(2, 2, 50, logographic=True) == 2

    def test_target_limits_placements(self):
        """No more words are embedded than the target allows."""
        words = ["cat", "dog", "sun", "hat", "pen", "cup", "owl", "fox"]
        result = generate(3, 3, "en", words, rng=random.Random(1))
        assert result.target_count == 4
        assert len(result.placements) <= 4


class TestLogographic:
    """Test cases for Japanese boards."""

    @pytest.mark.parametrize("seed", range(5))
    def test_seeded_from_compounds(self, seed):
        """Without a word list, Japanese boards embed curated compounds."""
        result = generate(5, 5, "ja", rng=random.Random(seed))
        assert result.target_count == 5
        assert len(result.placements) >= 1
        for placement in result.placements:
            assert len(placement.word) >= 2
            assert is_reachable(placement.word, result.grid)

    def test_caller_words_take_precedence(self):
        """A supplied word list replaces the curated compounds."""
        result = generate(5, 5, "ja", ["日本"], rng=random.Random(0))
        assert result.embedded_words == ["日本"]

    def test_latin_boards_are_not_seeded(self):
        """Alphabetic boards embed nothing without a word list."""
        result = generate(5, 5, "en", rng=random.Random(0))
        assert result.placements == []
        assert result.target_count == 0


class TestGridModel:
    """Test cases for the Grid model and adjacency helpers."""

    def test_from_rows(self):
        """Rows may be given as strings."""
        grid = Grid.from_rows(["AB", "CD"], "en")
        assert grid.get(1, 0) == "C"
        assert grid.get(2, 0) is None
        assert grid.to_lists() == [["A", "B"], ["C", "D"]]

    def test_ragged_rows_rejected(self):
        """Every row must have the same width."""
        with pytest.raises(ValueError):
            Grid.from_rows(["AB", "C"], "en")

    def test_multi_grapheme_cell_rejected(self):
        """A cell holds exactly one grapheme."""
        with pytest.raises(ValueError):
            Grid(language="en", cells=(("AB",),))

    def test_neighbors(self):
        """Corners have 3 neighbors, inner cells 8."""
        assert len(neighbors(Cell(0, 0), 3, 3)) == 3
        assert len(neighbors(Cell(1, 1), 3, 3)) == 8

    def test_is_adjacent(self):
        """Diagonal cells are adjacent, a cell is not adjacent to itself."""
        assert is_adjacent(Cell(0, 0), Cell(1, 1))
        assert not is_adjacent(Cell(0, 0), Cell(0, 0))
        assert not is_adjacent(Cell(0, 0), Cell(0, 2))

    def test_render_grid(self):
        """One line per row."""
        grid = Grid.from_rows(["AB", "CD"], "en")
        assert render_grid(grid) == "A B\nC D"
        assert grid.render("") == "AB\nCD"


class TestDifficulty:
    """Test cases for difficulty presets."""

    def test_presets(self):
        """Each preset maps to a board size."""
        assert board_size("EASY") == (5, 5)
        assert board_size("MEDIUM") == (7, 7)
        assert board_size("HARD") == (11, 11)

    def test_case_insensitive(self):
        """Preset names are case-insensitive."""
        assert get_difficulty("hard").name == "HARD"

    def test_unknown_difficulty(self):
        """An unknown preset is rejected."""
        with pytest.raises(ValueError):
            get_difficulty("IMPOSSIBLE")

    def test_recommended_timer(self):
        """Hard rounds run longer; unknown names fall back to the default."""
        assert recommended_timer("EASY") == 60
        assert recommended_timer("HARD") == 120
        assert recommended_timer("unknown") == 60
