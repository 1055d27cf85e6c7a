"""Data models for word-level verdicts and sentence scores."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class WordVerdict:
    """Correctness judgement for one target-word position.

    Attributes:
        position: Index of the word in the tokenized target sentence
        target_word: The normalized target token
        spoken_word: The spoken token aligned to this position (or None if omitted)
        is_correct: Whether the spoken token matches the target token
    """
    position: int
    target_word: str
    spoken_word: Optional[str]
    is_correct: bool

    @property
    def is_missed(self) -> bool:
        return self.spoken_word is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.target_word,
            "spoken": self.spoken_word,
            "correct": self.is_correct,
            "position": self.position,
        }


@dataclass(frozen=True)
class SentenceScore:
    """Accuracy of one spoken attempt at a target sentence.

    Attributes:
        accuracy_percent: Rounded share of correct target words (0-100)
        word_verdicts: One WordVerdict per target token, in target order
    """
    accuracy_percent: int
    word_verdicts: Tuple[WordVerdict, ...] = ()

    @property
    def correct_count(self) -> int:
        return sum(1 for v in self.word_verdicts if v.is_correct)

    @property
    def missed_words(self) -> List[str]:
        """Target words nothing was aligned to."""
        return [v.target_word for v in self.word_verdicts if v.is_missed]

    @property
    def incorrect_words(self) -> List[str]:
        """Target words that were not read correctly, omissions included."""
        return [v.target_word for v in self.word_verdicts if not v.is_correct]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accuracy": self.accuracy_percent,
            "word_results": [v.to_dict() for v in self.word_verdicts],
        }
