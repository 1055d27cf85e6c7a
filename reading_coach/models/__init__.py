"""Value types produced by the matching and scoring engine."""
from .verdicts import SentenceScore, WordVerdict

__all__ = ["SentenceScore", "WordVerdict"]
