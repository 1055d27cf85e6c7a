"""Sentence tokenization for alignment."""
from __future__ import annotations

from typing import List

from reading_coach.normalizer import split_words


def tokenize_text(text: str) -> List[str]:
    """Tokenize a target sentence or spoken transcript.

    Example: "The cat, sat." -> ["the", "cat", "sat"]

    Args:
        text: The raw sentence or transcript

    Returns:
        Lowercase word tokens with punctuation removed (internal apostrophes kept)
    """
    return split_words(text)
