"""
Test suite for the per-language alphabet providers.

Covers:
- Letter inventories per language
- Normalization (case folding, Hebrew final forms) and its idempotence
- Display forms for word-final graphemes
- Unsupported language tags
"""

import pytest
from lexiclash.alphabets import (
    UnsupportedLanguage,
    get_provider,
    supported_languages,
    letters,
    normalize,
    denormalize_for_display,
)


HEBREW_FINALS = ["ך", "ם", "ן", "ף", "ץ"]


class TestLetters:
    """Test cases for letter inventories."""

    def test_supported_languages(self):
        """Every board language has a registered provider."""
        assert supported_languages() == ["en", "he", "ja", "sv"]

    def test_english_letters(self):
        """English boards use the 26 upper-case letters."""
        inventory = letters("en")
        assert len(inventory) == 26
        assert inventory[0] == "A"
        assert inventory[-1] == "Z"

    def test_swedish_letters(self):
        """Swedish adds Å, Ä and Ö to the latin letters."""
        inventory = letters("sv")
        assert len(inventory) == 29
        for letter in ("Å", "Ä", "Ö"):
            assert letter in inventory

    def test_hebrew_letters_have_no_final_forms(self):
        """Hebrew boards only hold the 22 base letters."""
        inventory = letters("he")
        assert len(inventory) == 22
        for final in HEBREW_FINALS:
            assert final not in inventory

    def test_every_grapheme_is_single_character(self):
        """Every inventory entry is one grapheme."""
        for language in supported_languages():
            assert all(len(g) == 1 for g in letters(language))

    def test_inventories_have_no_duplicates(self):
        """Fill letters are drawn uniformly, so each appears once."""
        for language in supported_languages():
            inventory = letters(language)
            assert len(set(inventory)) == len(inventory)


class TestNormalize:
    """Test cases for grapheme normalization."""

    def test_latin_is_upper_cased(self):
        """Latin letters compare in upper case."""
        assert normalize("a", "en") == "A"
        assert normalize("A", "en") == "A"
        assert normalize("å", "sv") == "Å"

    def test_expanding_upper_case_is_left_alone(self):
        """A letter whose upper case is longer keeps its original form."""
        assert normalize("ß", "en") == "ß"

    def test_hebrew_final_forms_collapse(self):
        """Final forms normalize to their base letters."""
        assert normalize("ך", "he") == "כ"
        assert normalize("ם", "he") == "מ"
        assert normalize("ן", "he") == "נ"
        assert normalize("ף", "he") == "פ"
        assert normalize("ץ", "he") == "צ"

    def test_hebrew_base_letters_unchanged(self):
        """Base letters are already canonical."""
        for letter in letters("he"):
            assert normalize(letter, "he") == letter

    def test_japanese_is_identity(self):
        """Kanji have no alternate forms."""
        assert normalize("日", "ja") == "日"

    def test_normalize_is_idempotent(self):
        """Normalizing twice gives the same result as once."""
        samples = {
            "en": list("abcXYZ"),
            "sv": list("åäöÅÄÖ"),
            "he": list(letters("he")) + HEBREW_FINALS,
            "ja": list(letters("ja")),
        }
        for language, graphemes in samples.items():
            for g in graphemes:
                once = normalize(g, language)
                assert normalize(once, language) == once


class TestDisplay:
    """Test cases for display forms."""

    def test_hebrew_final_position_uses_final_form(self):
        """A letter ending a word is shown in its final form."""
        assert denormalize_for_display("כ", "he", is_final=True) == "ך"
        assert denormalize_for_display("מ", "he", is_final=True) == "ם"

    def test_hebrew_inner_position_uses_base_form(self):
        """Inside a word even a final form is shown as the base letter."""
        assert denormalize_for_display("כ", "he") == "כ"
        assert denormalize_for_display("ך", "he") == "כ"

    def test_hebrew_letter_without_final_form(self):
        """Letters with no final form are unchanged at the end of a word."""
        assert denormalize_for_display("א", "he", is_final=True) == "א"

    def test_latin_display_is_identity(self):
        """Latin graphemes are shown as stored."""
        assert denormalize_for_display("A", "en", is_final=True) == "A"

    def test_display_word_hebrew(self):
        """A board-form word gets its final letter back for display."""
        provider = get_provider("he")
        assert provider.display_word("שלומ") == "שלום"
        assert provider.display_word("שלום") == "שלום"

    def test_display_word_latin(self):
        """Latin words are displayed in board form."""
        assert get_provider("en").display_word("cat") == "CAT"


class TestCleanWord:
    """Test cases for preparing words for embedding."""

    def test_latin_word(self):
        """Latin words are upper-cased and split into letters."""
        assert get_provider("en").clean_word(" cat ") == ["C", "A", "T"]

    def test_hebrew_strips_vowel_points(self):
        """Vowel points and other marks are dropped from Hebrew words."""
        # shin + qamats + shin dot, lamed, vav + holam, final mem
        word = "\u05e9\u05b8\u05c1\u05dc\u05d5\u05b9\u05dd"
        assert get_provider("he").clean_word(word) == ["ש", "ל", "ו", "מ"]

    def test_hebrew_normalize_word_drops_vowel_points(self):
        """Pointed and bare spellings compare as the same letters."""
        provider = get_provider("he")
        pointed = "\u05e9\u05b8\u05c1\u05dc\u05d5\u05b9\u05dd"
        assert provider.normalize_word(pointed) == ["ש", "ל", "ו", "מ"]
        assert provider.normalize_word(pointed) == provider.normalize_word("שלום")
        assert provider.display_word(pointed) == "שלום"

    def test_japanese_compounds(self):
        """The Japanese provider carries multi-character compounds."""
        provider = get_provider("ja")
        assert provider.logographic is True
        assert len(provider.compounds) > 0
        assert all(len(c) >= 2 for c in provider.compounds)


class TestUnsupportedLanguage:
    """Test cases for unknown language tags."""

    def test_get_provider_raises(self):
        """An unknown tag raises UnsupportedLanguage."""
        with pytest.raises(UnsupportedLanguage) as exc_info:
            get_provider("xx")
        assert exc_info.value.language == "xx"

    def test_is_value_error(self):
        """UnsupportedLanguage is a ValueError."""
        with pytest.raises(ValueError):
            letters("klingon")

    def test_module_functions_raise(self):
        """Every lookup helper rejects an unknown tag."""
        with pytest.raises(UnsupportedLanguage):
            normalize("a", "xx")
        with pytest.raises(UnsupportedLanguage):
            denormalize_for_display("a", "xx")
