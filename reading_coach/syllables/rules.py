"""Letter classes and letter groups used by the syllabifier."""
from __future__ import annotations

from typing import FrozenSet

# y is counted as a vowel: it carries the vowel sound in "happy", "my", "gym"
VOWELS: FrozenSet[str] = frozenset("aeiouy")

# Consonant groups that are pronounced together and start the next syllable
CONSONANT_BLENDS: FrozenSet[str] = frozenset({
    "bl", "br", "ch", "cl", "cr", "dr", "fl", "fr", "gl", "gr",
    "pl", "pr", "sc", "sh", "sk", "sl", "sm", "sn", "sp", "st",
    "sw", "th", "tr", "tw", "wh", "wr", "sch", "scr", "shr", "spl",
    "spr", "squ", "str", "thr", "ck", "ng", "nk", "ph", "gh",
})

# Vowel pairs that make a single sound and are never split
VOWEL_DIGRAPHS: FrozenSet[str] = frozenset({
    "ai", "au", "aw", "ay", "ea", "ee", "ei", "eu", "ew",
    "ey", "ie", "oa", "oe", "oi", "oo", "ou", "ow", "oy", "ue", "ui",
})

# Words this short are never split
MIN_SPLIT_LENGTH = 4

DEFAULT_SEPARATOR = " • "
