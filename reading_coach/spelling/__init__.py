"""Allow/deny checks for words entered into practice lists."""
from .common_words import COMMON_ENGLISH_WORDS
from .spellcheck import DictionaryLookup, free_dictionary_lookup, is_valid_english_word, validate_word

__all__ = [
    "COMMON_ENGLISH_WORDS",
    "DictionaryLookup",
    "free_dictionary_lookup",
    "is_valid_english_word",
    "validate_word",
]
