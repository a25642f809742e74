"""Find every word from a caller-supplied word list that is traceable on a grid."""

from typing import Dict, Iterable, List, Optional, Set

from ..alphabets import get_provider
from ..board.grid import neighbors
from ..board.models import Cell, Grid


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.is_word = False


class Trie:
    """Prefix trie over normalized words, used to prune the grid search."""

    def __init__(self):
        self.root = TrieNode()

    def insert(self, graphemes: Iterable[str]) -> None:
        node = self.root
        for g in graphemes:
            if g not in node.children:
                node.children[g] = TrieNode()
            node = node.children[g]
        node.is_word = True


def build_trie(words: Iterable[str], language: str, min_length: int = 3, max_length: int = 15) -> Trie:
    """Load a word list into a trie, normalized for `language` and filtered by length."""
    provider = get_provider(language)
    trie = Trie()
    for word in words:
        graphemes = provider.normalize_word(word.strip())
        if min_length <= len(graphemes) <= max_length:
            trie.insert(graphemes)
    return trie


def find_all_words(
    grid: Grid,
    words: Iterable[str],
    min_length: int = 3,
    max_length: int = 15,
    max_words: int = 500,
    trie: Optional[Trie] = None,
) -> List[str]:
    """
    Find all listed words that trace a legal path on the grid.

    Args:
        grid: Grid to search
        words: Word list to search for (ignored when `trie` is given)
        min_length: Shortest word to report, in graphemes
        max_length: Longest word to report, in graphemes
        max_words: Stop after this many words
        trie: Prebuilt trie, for callers solving many grids with one word list

    Returns:
        Found words in normalized board form, longest first then alphabetical
    """
    if grid.is_empty:
        return []

    provider = get_provider(grid.language)
    if trie is None:
        trie = build_trie(words, grid.language, min_length, max_length)

    cells = [[provider.normalize(g) for g in row] for row in grid.cells]
    rows, cols = grid.rows, grid.cols
    found: Set[str] = set()

    def dfs(cell: Cell, node: TrieNode, prefix: str, length: int, visited: Set[Cell]) -> None:
        if len(found) >= max_words:
            return
        if node.is_word and length >= min_length:
            found.add(prefix)
        if length >= max_length or not node.children:
            return

        visited.add(cell)
        for nxt in neighbors(cell, rows, cols):
            if nxt in visited:
                continue
            grapheme = cells[nxt.row][nxt.col]
            child = node.children.get(grapheme)
            if child is not None:
                dfs(nxt, child, prefix + grapheme, length + 1, visited)
        visited.remove(cell)

    for start in grid.positions():
        if len(found) >= max_words:
            break
        grapheme = cells[start.row][start.col]
        node = trie.root.children.get(grapheme)
        if node is not None:
            dfs(start, node, grapheme, 1, set())

    return sorted(found, key=lambda w: (-len(w), w))
