"""Sentence-level accuracy scoring for read-aloud attempts."""
from __future__ import annotations

from typing import List

from ..alignment.aligner import STRATEGY_GREEDY, align_words
from ..alignment.normalizer import filter_fillers
from ..alignment.tokenizer import tokenize_text
from ..config import SENTENCE_ACCURACY_THRESHOLD
from ..matching.word_matcher import is_match
from ..models.verdicts import SentenceScore, WordVerdict
from ..normalizer import normalize_text


def accuracy_percent(correct: int, total: int) -> int:
    """Percentage of correct words, rounded half-up to an integer.

    Integer arithmetic keeps the rounding exact (2/3 -> 67, 1/8 -> 13).
    """
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)


def score_sentence(spoken: str, target: str, strategy: str = STRATEGY_GREEDY) -> SentenceScore:
    """Score a spoken transcript against a target sentence.

    Fillers ("um", "uh", ...) are removed from the transcript before
    alignment so hesitations never cost the reader a word.

    Args:
        spoken: Raw transcript from the speech recognizer
        target: The sentence the child was asked to read
        strategy: "greedy" (bounded lookahead) or "dp" (edit-distance)

    Returns:
        SentenceScore with exactly one WordVerdict per target token

    Raises:
        ValueError: If strategy is unknown
    """
    target_tokens = tokenize_text(target)
    spoken_tokens = filter_fillers(tokenize_text(spoken))

    if not target_tokens:
        return SentenceScore(accuracy_percent=0, word_verdicts=())

    alignment = align_words(target_tokens, spoken_tokens, strategy=strategy)

    verdicts: List[WordVerdict] = []
    for position, (target_word, spoken_word) in enumerate(zip(target_tokens, alignment)):
        correct = spoken_word is not None and is_match(spoken_word, target_word)
        verdicts.append(WordVerdict(
            position=position,
            target_word=target_word,
            spoken_word=spoken_word,
            is_correct=correct,
        ))

    correct_count = sum(1 for v in verdicts if v.is_correct)
    return SentenceScore(
        accuracy_percent=accuracy_percent(correct_count, len(target_tokens)),
        word_verdicts=tuple(verdicts),
    )


def is_passing(score: SentenceScore, threshold: int = SENTENCE_ACCURACY_THRESHOLD) -> bool:
    """Classify a sentence attempt as read correctly."""
    return score.accuracy_percent >= threshold


def check_word(spoken: str, target: str) -> WordVerdict:
    """Verdict for a single-word practice item."""
    spoken_word = normalize_text(spoken) or None
    return WordVerdict(
        position=0,
        target_word=normalize_text(target),
        spoken_word=spoken_word,
        is_correct=is_match(spoken, target),
    )
