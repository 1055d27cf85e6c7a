"""Syllable segmentation for the word coach."""
from .rules import CONSONANT_BLENDS, VOWEL_DIGRAPHS, VOWELS
from .syllabifier import format_syllables, is_consonant, is_vowel, normalize_word, syllabify

__all__ = [
    "syllabify",
    "format_syllables",
    "normalize_word",
    "is_vowel",
    "is_consonant",
    "VOWELS",
    "CONSONANT_BLENDS",
    "VOWEL_DIGRAPHS",
]
