"""Fuzzy single-word matching tolerant of children's speech and ASR noise."""
from __future__ import annotations

from reading_coach.normalizer import normalize_text

from .levenshtein import levenshtein
from .phonetic_rules import are_phonetically_similar

# Targets this short only tolerate one edit ("in" vs "on" must stay distinct)
SHORT_WORD_MAX_LENGTH = 3
SHORT_WORD_MAX_DISTANCE = 1
LONG_WORD_MAX_DISTANCE = 2


def match_threshold(target: str) -> int:
    """Maximum edit distance accepted for a normalized target word."""
    if len(target) <= SHORT_WORD_MAX_LENGTH:
        return SHORT_WORD_MAX_DISTANCE
    return LONG_WORD_MAX_DISTANCE


def is_match(spoken: str, target: str) -> bool:
    """Decide whether spoken text is "the same word" as the target.

    Checks run in order and the first success wins:
      1. exact match after normalization
      2. the target is one of the words of a spoken phrase ("the word is cat")
      3. edit distance within threshold, for the whole phrase or any of its words
      4. equal phonetic keys after the child-speech substitutions

    Args:
        spoken: Raw transcript text (one word or a short phrase)
        target: Raw target word

    Returns:
        True if the spoken text should be credited as the target word
    """
    clean_spoken = normalize_text(spoken)
    clean_target = normalize_text(target)

    if clean_spoken == clean_target:
        return True

    words = clean_spoken.split()
    if clean_target in words:
        return True

    max_distance = match_threshold(clean_target)
    if levenshtein(clean_spoken, clean_target) <= max_distance:
        return True
    for word in words:
        if levenshtein(word, clean_target) <= max_distance:
            return True

    return are_phonetically_similar(clean_spoken, clean_target)
