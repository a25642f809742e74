"""
Per-language alphabet providers.

Each supported board language has exactly one provider. A provider knows the
graphemes a board may hold, how to canonicalize a grapheme for comparison
(normalize) and how to turn a canonical grapheme back into the form a player
expects to read (denormalize for display). The board generator and the path
verifier only ever compare normalized graphemes.
"""

import re
import unicodedata
from typing import Dict, List, Tuple

from .data import (
    ENGLISH_LETTERS,
    SWEDISH_LETTERS,
    HEBREW_LETTERS,
    HEBREW_FINAL_TO_REGULAR,
    HEBREW_REGULAR_TO_FINAL,
    JAPANESE_LETTERS,
    KANJI_COMPOUNDS,
)


class UnsupportedLanguage(ValueError):
    """Raised for a language tag with no registered alphabet."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class AlphabetProvider:
    """
    Base provider: identity normalization over a fixed inventory.

    Attributes:
        code: Language tag the provider is registered under
        letters: Ordered grapheme inventory used to fill boards
        script_pattern: Regex a submitted word must match to be in this script
        logographic: True when single graphemes are not words on their own
        filters_words: True when clean_word drops graphemes outside the inventory
    """

    code: str = ""
    letters: Tuple[str, ...] = ()
    script_pattern: re.Pattern = re.compile(r"^.+$")
    logographic: bool = False
    filters_words: bool = False

    @property
    def compounds(self) -> Tuple[str, ...]:
        """Curated multi-grapheme words used to seed boards."""
        return ()

    def normalize(self, grapheme: str) -> str:
        return grapheme

    def denormalize_for_display(self, grapheme: str, is_final: bool = False) -> str:
        return grapheme

    def normalize_word(self, word: str) -> List[str]:
        """Split a word into normalized graphemes."""
        return [self.normalize(ch) for ch in word]

    def clean_word(self, word: str) -> List[str]:
        """
        Normalize a word for embedding.

        Providers with `filters_words` set also drop every grapheme outside
        the inventory (vowel points, punctuation, stray latin letters).
        """
        graphemes = self.normalize_word(word.strip())
        if self.filters_words:
            inventory = set(self.letters)
            graphemes = [g for g in graphemes if g in inventory]
        return graphemes

    def display_word(self, word: str) -> str:
        """Render a word for display, applying final-position forms."""
        graphemes = self.normalize_word(word)
        last = len(graphemes) - 1
        return "".join(
            self.denormalize_for_display(g, is_final=(i == last))
            for i, g in enumerate(graphemes)
        )

    def matches_script(self, word: str) -> bool:
        return bool(self.script_pattern.match(word))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"


class LatinAlphabet(AlphabetProvider):
    """English A-Z. Boards hold upper-case letters."""

    code = "en"
    letters = tuple(ENGLISH_LETTERS)
    script_pattern = re.compile(r"^[a-zA-Z]+$")

    def normalize(self, grapheme: str) -> str:
        upper = grapheme.upper()
        # Some letters expand when upper-cased (e.g. 'ß' -> 'SS'); keep those as-is
        return upper if len(upper) == len(grapheme) else grapheme


class SwedishAlphabet(LatinAlphabet):
    """Swedish A-Z plus Å, Ä and Ö."""

    code = "sv"
    letters = tuple(SWEDISH_LETTERS)
    script_pattern = re.compile(r"^[a-zA-ZåäöÅÄÖ]+$")


class HebrewAlphabet(AlphabetProvider):
    """
    Hebrew with word-final letter forms.

    Final forms (ך ם ן ף ץ) collapse to their base letters for comparison.
    Boards only ever hold base letters; the final form is re-applied for
    display when the letter ends a completed word.
    Vowel points are dropped, so a pointed word matches the bare letters.
    """

    code = "he"
    letters = tuple(HEBREW_LETTERS)
    script_pattern = re.compile(r"^[\u0590-\u05FF]+$")
    filters_words = True

    def normalize(self, grapheme: str) -> str:
        return HEBREW_FINAL_TO_REGULAR.get(grapheme, grapheme)

    def normalize_word(self, word: str) -> List[str]:
        # Vowel points and cantillation marks ride on the preceding letter
        return [self.normalize(ch) for ch in word if unicodedata.category(ch) != "Mn"]

    def denormalize_for_display(self, grapheme: str, is_final: bool = False) -> str:
        base = self.normalize(grapheme)
        if is_final:
            return HEBREW_REGULAR_TO_FINAL.get(base, base)
        return base


class JapaneseAlphabet(AlphabetProvider):
    """Kanji boards seeded with multi-character compounds."""

    code = "ja"
    letters = tuple(JAPANESE_LETTERS)
    script_pattern = re.compile(r"^[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]+$")
    logographic = True

    @property
    def compounds(self) -> Tuple[str, ...]:
        return tuple(KANJI_COMPOUNDS)


_PROVIDERS: Dict[str, AlphabetProvider] = {
    provider.code: provider
    for provider in (LatinAlphabet(), HebrewAlphabet(), SwedishAlphabet(), JapaneseAlphabet())
}


def supported_languages() -> List[str]:
    """Language tags with a registered alphabet."""
    return sorted(_PROVIDERS)


def get_provider(language: str) -> AlphabetProvider:
    """
    Look up the provider for a language tag.

    Raises:
        UnsupportedLanguage: If no alphabet is registered for the tag
    """
    try:
        return _PROVIDERS[language]
    except (KeyError, TypeError):
        raise UnsupportedLanguage(language) from None


def letters(language: str) -> Tuple[str, ...]:
    """Ordered grapheme inventory for a language."""
    return get_provider(language).letters


def normalize(grapheme: str, language: str) -> str:
    """Canonical form of a grapheme, used for every comparison."""
    return get_provider(language).normalize(grapheme)


def denormalize_for_display(grapheme: str, language: str, is_final: bool = False) -> str:
    """Display form of a grapheme; `is_final` marks the last grapheme of a word."""
    return get_provider(language).denormalize_for_display(grapheme, is_final=is_final)
