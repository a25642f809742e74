"""Per-language letter inventories and normalization rules."""

from .providers import (
    AlphabetProvider,
    LatinAlphabet,
    SwedishAlphabet,
    HebrewAlphabet,
    JapaneseAlphabet,
    UnsupportedLanguage,
    get_provider,
    supported_languages,
    letters,
    normalize,
    denormalize_for_display,
)

__all__ = [
    # Providers
    "AlphabetProvider",
    "LatinAlphabet",
    "SwedishAlphabet",
    "HebrewAlphabet",
    "JapaneseAlphabet",
    # Errors
    "UnsupportedLanguage",
    # Lookup
    "get_provider",
    "supported_languages",
    "letters",
    "normalize",
    "denormalize_for_display",
]
