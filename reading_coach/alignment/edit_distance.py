"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

# sub_cost(hyp_token, ref_token) -> cost in [0, 1] of pairing the two tokens
SubstitutionCost = Callable[[str, str], float]


def exact_cost(hyp_token: str, ref_token: str) -> float:
    return 0.0 if hyp_token == ref_token else 1.0


def align_sequences(
    ref: Sequence[str],
    hyp: Sequence[str],
    sub_cost: SubstitutionCost = exact_cost,
) -> List[Tuple[str, Optional[int], Optional[int]]]:
    """Classic edit-distance alignment returning a path of operations.

    Returns list of tuples: (op, ref_index, hyp_index)
      op in {"match","sub","del","ins"}.

      match -> pairing cost below 1 (exact or close enough)
      sub -> paired but different words
      del -> missed words
      ins -> extra words

    Args:
        ref: Reference sequence (target tokens)
        hyp: Hypothesis sequence (spoken tokens)
        sub_cost: Cost of pairing a hyp token with a ref token; insertions
            and deletions always cost 1

    Returns:
        List of tuples: (operation, ref_index, hyp_index)
    """
    n, m = len(ref), len(hyp)
    dp = [[0.0] * (m + 1) for _ in range(n + 1)]
    back: List[List[Tuple[str, Optional[int], Optional[int]]]] = [
        [("start", None, None)] * (m + 1) for _ in range(n + 1)
    ]

    for i in range(1, n + 1):
        dp[i][0] = float(i)
        back[i][0] = ("del", i - 1, None)
    for j in range(1, m + 1):
        dp[0][j] = float(j)
        back[0][j] = ("ins", None, j - 1)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = sub_cost(hyp[j - 1], ref[i - 1])
            # diagonal first so ties prefer pairing words over gaps
            candidates = [
                (dp[i - 1][j - 1] + cost, ("match" if cost < 1.0 else "sub", i - 1, j - 1)),
                (dp[i - 1][j] + 1.0, ("del", i - 1, None)),
                (dp[i][j - 1] + 1.0, ("ins", None, j - 1)),
            ]
            best_cost, best_step = min(candidates, key=lambda x: x[0])
            dp[i][j] = best_cost
            back[i][j] = best_step

    # backtrack
    ops: List[Tuple[str, Optional[int], Optional[int]]] = []
    i, j = n, m
    while not (i == 0 and j == 0):
        op, ri, hj = back[i][j]
        ops.append((op, ri, hj))
        if op in ("match", "sub"):
            i -= 1
            j -= 1
        elif op == "del":
            i -= 1
        elif op == "ins":
            j -= 1
        else:
            break
    ops.reverse()
    return ops
