"""Word and sentence scoring for read-aloud attempts."""
from .sentence_scorer import accuracy_percent, check_word, is_passing, score_sentence

__all__ = ["score_sentence", "check_word", "is_passing", "accuracy_percent"]
