"""Alignment of spoken tokens onto target sentence positions."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from reading_coach.matching.word_matcher import is_match

from .edit_distance import align_sequences

TokenMatcher = Callable[[str, str], bool]

# How many spoken tokens (from the cursor) may be searched for the current target
SPOKEN_LOOKAHEAD = 3
# How many later target positions the current spoken token is checked against
TARGET_LOOKAHEAD = 2

# DP pairing cost for a fuzzy (non-exact) match; below 1 so it beats a gap
FUZZY_MATCH_COST = 0.4

STRATEGY_GREEDY = "greedy"
STRATEGY_DP = "dp"
STRATEGIES = (STRATEGY_GREEDY, STRATEGY_DP)


def _matches_later_target(
    token: str,
    target: Sequence[str],
    i: int,
    target_window: int,
    matcher: TokenMatcher,
) -> bool:
    later_end = min(i + 1 + target_window, len(target))
    return any(matcher(token, target[k]) for k in range(i + 1, later_end))


def _exact(token: str, target_word: str) -> bool:
    return token == target_word


def align_greedy(
    target: Sequence[str],
    spoken: Sequence[str],
    *,
    spoken_window: int = SPOKEN_LOOKAHEAD,
    target_window: int = TARGET_LOOKAHEAD,
    matcher: TokenMatcher = is_match,
) -> List[Optional[str]]:
    """Greedy left-to-right alignment with bounded lookahead.

    Handles the things children do while reading aloud:
      - repetitions and stutters ("the the dog") are absorbed by lookahead
      - skipped words leave their position empty without consuming speech
      - anything else is still recorded at the position where it was said

    A fuzzy lookahead hit yields to an exact one: if the token at the cursor
    is literally a later target word ("the sat" read for "the cat sat"), the
    current position is treated as skipped instead of crediting "sat" as "cat".

    The spoken cursor only moves forward, so credit always follows
    left-to-right reading progress.

    Args:
        target: Target sentence tokens
        spoken: Spoken tokens with fillers already removed
        spoken_window: Spoken tokens examined per target position
        target_window: Later target positions checked for a skip-ahead
        matcher: Word equivalence predicate, called as matcher(spoken, target)

    Returns:
        One entry per target position: the aligned spoken token or None
    """
    result: List[Optional[str]] = [None] * len(target)
    cursor = 0

    for i, target_word in enumerate(target):
        if cursor >= len(spoken):
            break

        current = spoken[cursor]
        window_end = min(cursor + spoken_window, len(spoken))
        hit = next(
            (j for j in range(cursor, window_end) if matcher(spoken[j], target_word)),
            None,
        )

        if hit is not None:
            fuzzy_hit = spoken[hit] != target_word
            if fuzzy_hit and current != target_word and _matches_later_target(
                current, target, i, target_window, _exact
            ):
                continue
            result[i] = spoken[hit]
            cursor = hit + 1
            continue

        if _matches_later_target(current, target, i, target_window, matcher):
            # skipped ahead: keep the token for the later position
            continue
        result[i] = current
        cursor += 1

    return result


def _fuzzy_cost(spoken_token: str, target_word: str) -> float:
    if spoken_token == target_word:
        return 0.0
    if is_match(spoken_token, target_word):
        return FUZZY_MATCH_COST
    return 1.0


def align_dp(target: Sequence[str], spoken: Sequence[str]) -> List[Optional[str]]:
    """Edit-distance alignment where exact words cost nothing and fuzzy ones little.

    Finds a globally minimal alignment instead of the greedy one. Extra
    spoken words (insertions) are dropped; missed target words stay None.
    """
    result: List[Optional[str]] = [None] * len(target)
    for op, ri, hj in align_sequences(target, spoken, sub_cost=_fuzzy_cost):
        if op in ("match", "sub"):
            result[ri] = spoken[hj]
    return result


def align_words(
    target: Sequence[str],
    spoken: Sequence[str],
    strategy: str = STRATEGY_GREEDY,
) -> List[Optional[str]]:
    """Align spoken tokens to target positions with the named strategy.

    Raises:
        ValueError: If strategy is not "greedy" or "dp"
    """
    if strategy == STRATEGY_GREEDY:
        return align_greedy(target, spoken)
    if strategy == STRATEGY_DP:
        return align_dp(target, spoken)
    raise ValueError(f"Unknown alignment strategy: {strategy!r} (expected one of {STRATEGIES})")
