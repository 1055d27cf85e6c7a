"""Speech-accuracy matching and scoring for children's read-aloud practice."""
from .matching import is_match, levenshtein
from .models import SentenceScore, WordVerdict
from .scorer import check_word, is_passing, score_sentence
from .spelling import is_valid_english_word, validate_word
from .syllables import format_syllables, normalize_word, syllabify

__all__ = [
    "is_match",
    "levenshtein",
    "score_sentence",
    "check_word",
    "is_passing",
    "syllabify",
    "format_syllables",
    "normalize_word",
    "is_valid_english_word",
    "validate_word",
    "SentenceScore",
    "WordVerdict",
]

__version__ = "0.1.0"
