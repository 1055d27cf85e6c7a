"""Single-word fuzzy matching."""
from .levenshtein import levenshtein
from .phonetic_rules import PHONETIC_SUBSTITUTIONS, are_phonetically_similar, phonetic_key
from .word_matcher import is_match, match_threshold

__all__ = [
    "is_match",
    "match_threshold",
    "levenshtein",
    "phonetic_key",
    "are_phonetically_similar",
    "PHONETIC_SUBSTITUTIONS",
]
