"""Token normalization shared by matching, alignment and spelling."""
from __future__ import annotations

import re
from typing import List

# Anything that is not a letter (any script), digit or apostrophe is dropped from a token
_NON_TOKEN_CHARS = re.compile(r"[^\w']+|_+")
_WHITESPACE = re.compile(r"\s+")


def normalize_token(token: str) -> str:
    """Normalize a single word for comparison.

    Lowercases, drops punctuation, and keeps apostrophes only when they sit
    inside the word ("don't" stays, "'cat'" becomes "cat").

    Args:
        token: The raw word string

    Returns:
        Normalized token, possibly empty if nothing word-like remains
    """
    token = token.lower().strip()
    token = _NON_TOKEN_CHARS.sub("", token)
    return token.strip("'")


def split_words(text: str) -> List[str]:
    """Split raw text on whitespace and normalize each piece, dropping empties."""
    tokens = []
    for raw in _WHITESPACE.split(text.strip()):
        normalized = normalize_token(raw)
        if normalized:
            tokens.append(normalized)
    return tokens


def normalize_text(text: str) -> str:
    """Normalize a phrase into space-separated tokens.

    Example: "  The word is: CAT! " -> "the word is cat"
    """
    return " ".join(split_words(text))
