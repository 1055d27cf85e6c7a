"""Heuristic English syllabification for pronunciation coaching.

The chunks pace sequential audio playback in the word coach. They follow
simple vowel/consonant patterns (V-CV, VC-CV, blends kept together) and
may disagree with a dictionary on edge cases; the only hard guarantee is
that joining the chunks gives back the (lowercased) word.
"""
from __future__ import annotations

import re
from typing import List, Optional, Sequence

from .rules import CONSONANT_BLENDS, DEFAULT_SEPARATOR, MIN_SPLIT_LENGTH, VOWEL_DIGRAPHS, VOWELS

_NON_WORD_CHARS = re.compile(r"[^a-z']")


def is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def is_consonant(char: str) -> bool:
    return char.isascii() and char.isalpha() and not is_vowel(char)


def _has_vowel(chunk: str) -> bool:
    return any(is_vowel(c) for c in chunk)


def _consonants_kept(word: str, i: int) -> Optional[int]:
    """How many consonants after the vowel at i stay in its syllable.

    Returns 0 to close the syllable right after the vowel, 1 to close it
    after the next consonant, or None when there is no boundary here.
    """
    if i + 2 >= len(word):
        return None
    first, second = word[i + 1], word[i + 2]
    if not is_consonant(first):
        return None
    if is_vowel(second):
        # V-C-V: the consonant opens the next syllable
        return 0
    if is_consonant(second):
        # V-C-C: a blend moves together, otherwise split between the consonants
        if word[i + 1:i + 3] in CONSONANT_BLENDS or word[i + 1:i + 4] in CONSONANT_BLENDS:
            return 0
        return 1
    return None


def _merge_consonant_only(syllables: Sequence[str]) -> List[str]:
    """Fold vowel-less chunks into a neighbour (the previous one when there is one)."""
    result: List[str] = []
    leading = ""
    for syllable in syllables:
        if _has_vowel(syllable):
            result.append(leading + syllable)
            leading = ""
        elif result:
            result[-1] += syllable
        else:
            leading += syllable
    if leading:
        if result:
            result[-1] += leading
        else:
            result.append(leading)
    return result


def syllabify(word: str) -> List[str]:
    """Split a word into syllable-like chunks.

    Example: "rabbit" -> ["rab", "bit"], "open" -> ["o", "pen"]

    Args:
        word: A single word, any case

    Returns:
        Non-empty list of lowercase chunks whose concatenation is the word
    """
    normalized = word.lower().strip()

    if len(normalized) < MIN_SPLIT_LENGTH:
        return [normalized]
    if sum(1 for c in normalized if is_vowel(c)) <= 1:
        return [normalized]

    syllables: List[str] = []
    current = ""
    i = 0
    while i < len(normalized):
        current += normalized[i]
        if is_vowel(normalized[i]) and i < len(normalized) - 1:
            if normalized[i:i + 2] in VOWEL_DIGRAPHS:
                # digraph stays whole and never opens a boundary
                current += normalized[i + 1]
                i += 2
                continue
            kept = _consonants_kept(normalized, i)
            if kept is not None:
                current += normalized[i + 1:i + 1 + kept]
                i += kept
                syllables.append(current)
                current = ""
        i += 1

    if current:
        syllables.append(current)

    cleaned = _merge_consonant_only(syllables)
    if not cleaned:
        return [normalized]
    return cleaned


def format_syllables(syllables: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join syllables for display, e.g. "rab • bit"."""
    return separator.join(syllables)


def normalize_word(word: str) -> str:
    """Normalize a practice word for storage: lowercase letters and apostrophes only."""
    return _NON_WORD_CHARS.sub("", word.lower().strip())
