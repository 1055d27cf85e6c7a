"""Character-level edit distance."""
from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Classic Levenshtein distance (insert, delete, substitute; no transposition).

    Keeps a single rolling row of the (len(a)+1) x (len(b)+1) cost matrix.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr.append(min(
                prev[j] + 1,         # delete
                curr[j - 1] + 1,     # insert
                prev[j - 1] + cost,  # substitute / keep
            ))
        prev = curr
    return prev[-1]
