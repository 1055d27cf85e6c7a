"""Grapheme substitutions modelling children's mispronunciations and ASR confusions."""
from __future__ import annotations

import re
from typing import Pattern, Tuple

# Ordered rewrites applied identically to spoken and target text.
# Order matters: each rule sees the output of the ones before it, so the
# table acts as a canonicalization rather than a set of alternatives.
PHONETIC_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    # TH sounds
    ("th", "f"),      # "three" -> "free"
    ("th", "d"),      # "this" -> "dis"
    ("th", "v"),      # "father" -> "faver"
    ("th", "s"),      # "think" -> "sink"
    ("th", "t"),      # "three" -> "tree"

    # W sounds
    ("wh", "w"),      # "what" -> "wat"
    ("w", "v"),       # "water" -> "vater"

    # R sounds
    ("r", "w"),       # "rabbit" -> "wabbit"
    ("er$", "a"),     # "water" -> "wata"
    ("or$", "a"),     # "doctor" -> "docta"

    # L sounds
    ("l", "w"),       # "little" -> "wittle"
    ("l", "y"),       # "love" -> "yove"

    ("ph", "f"),      # "phone" -> "fone"
    ("ck", "k"),      # "back" -> "bak"
    ("ght", "t"),     # "night" -> "nit"
    ("tion", "shun"),  # "action" -> "akshun"
    ("sion", "zhun"),  # "vision" -> "vizhun"

    # S and SH sounds
    ("sh", "s"),      # "ship" -> "sip"
    ("s", "th"),      # "sun" -> "thun" (lisp)
    ("ch", "sh"),     # "chip" -> "ship"
    ("ch", "t"),      # "chip" -> "tip"

    # Dropped endings
    ("ing$", "in"),   # "running" -> "runnin"
    ("ed$", "d"),     # "walked" -> "walkd"
    ("ed$", "t"),     # "jumped" -> "jumpt"

    # Double letters
    ("ll", "l"),
    ("ss", "s"),
    ("tt", "t"),
    ("ff", "f"),

    # Silent letters
    ("kn", "n"),      # "know" -> "now"
    ("wr", "r"),      # "write" -> "rite"
    ("gn", "n"),      # "gnome" -> "nome"
    ("mb$", "m"),     # "climb" -> "clim"
)

_COMPILED_SUBSTITUTIONS: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(pattern), replacement) for pattern, replacement in PHONETIC_SUBSTITUTIONS
)


def phonetic_key(text: str) -> str:
    """Rewrite text through every substitution in order.

    Two strings with the same key are treated as the same spoken word.
    """
    for pattern, replacement in _COMPILED_SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


def are_phonetically_similar(spoken: str, target: str) -> bool:
    """Check whether spoken and target collapse to the same phonetic key.

    Args:
        spoken: Normalized spoken text
        target: Normalized target word

    Returns:
        True if both rewrite to an identical string
    """
    return phonetic_key(spoken) == phonetic_key(target)
