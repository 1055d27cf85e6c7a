"""Alignment utilities for matching target sentences to spoken transcripts."""
from .aligner import STRATEGIES, align_dp, align_greedy, align_words
from .normalizer import FILLER_WORDS, filter_fillers, is_filler
from .tokenizer import tokenize_text

__all__ = [
    "align_words",
    "align_greedy",
    "align_dp",
    "tokenize_text",
    "filter_fillers",
    "is_filler",
    "FILLER_WORDS",
    "STRATEGIES",
]
