"""Filler-word handling for spoken transcripts."""
from __future__ import annotations

from typing import FrozenSet, List, Sequence

# Hesitation sounds and verbal fillers children produce while reading aloud.
# They must never occupy an alignment slot.
FILLER_WORDS: FrozenSet[str] = frozenset({
    "um", "uh", "umm", "uhh", "erm", "er", "ah", "ahh",
    "like", "so", "well", "okay", "ok",
    "hmm", "hm", "mm", "mmm",
    "oh", "ooh",
})


def is_filler(token: str) -> bool:
    """Check if a normalized token is a filler/hesitation word."""
    return token in FILLER_WORDS


def filter_fillers(tokens: Sequence[str]) -> List[str]:
    """Drop filler tokens, keeping the order of the rest."""
    return [t for t in tokens if not is_filler(t)]
