from __future__ import annotations
from typing import List

# Returned when the true distance is larger than the caller's bound
EXCEEDS_BOUND: int = -1


def damerau_levenshtein(a: str, b: str, max_distance: int) -> int:
    """
    Bounded Damerau-Levenshtein distance (optimal string alignment variant):
    insertions, deletions, substitutions and transpositions of two adjacent
    characters, each with cost 1. No substring is edited more than once, so
    "ca" -> "abc" is 3 here, not 2.

    Returns the distance when it is <= max_distance, else EXCEEDS_BOUND.
    Raises ValueError for a negative max_distance.

      damerau_levenshtein("kitten", "sitting", 5) -> 3
      damerau_levenshtein("ab", "ba", 2)          -> 1
      damerau_levenshtein("abc", "xyz", 1)        -> -1
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0 (got {max_distance})")
    if a == b:
        return 0

    # shorter string drives the outer loop
    if len(a) > len(b):
        a, b = b, a
    la, lb = len(a), len(b)
    if lb - la > max_distance:
        return EXCEEDS_BOUND

    # common suffix and prefix do not change the distance
    while la > 0 and a[la - 1] == b[lb - 1]:
        la -= 1
        lb -= 1
    start = 0
    while start < la and a[start] == b[start]:
        start += 1
    la -= start
    lb -= start

    # all of the shorter string matched: only deletions remain
    if la == 0:
        return lb if lb <= max_distance else EXCEEDS_BOUND

    a = a[start:start + la]
    b = b[start:start + lb]
    return _rows(a, b, max_distance)


def _rows(a: str, b: str, max_distance: int) -> int:
    """
    Fill the DP matrix row by row for len(a) <= len(b), both non-empty.
    Three rolling rows: the transposition term reads row i-2.
    """
    lb = len(b)
    prev2: List[int] = [0] * (lb + 1)
    prev: List[int] = list(range(lb + 1))
    cur: List[int] = [0] * (lb + 1)

    prev_ca = ""
    for i, ca in enumerate(a, start=1):
        cur[0] = i
        row_min = i
        prev_cb = ""
        for j, cb in enumerate(b, start=1):
            value = prev[j - 1] if ca == cb else prev[j - 1] + 1   # match / substitution
            if prev[j] + 1 < value:                                  # deletion
                value = prev[j] + 1
            if cur[j - 1] + 1 < value:                               # insertion
                value = cur[j - 1] + 1
            if i > 1 and j > 1 and ca == prev_cb and prev_ca == cb:  # transposition
                if prev2[j - 2] + 1 < value:
                    value = prev2[j - 2] + 1
            cur[j] = value
            if value < row_min:
                row_min = value
            prev_cb = cb

        # every later row is at least this row's minimum
        if row_min > max_distance:
            return EXCEEDS_BOUND
        prev2, prev, cur = prev, cur, prev2
        prev_ca = ca

    result = prev[lb]
    return result if result <= max_distance else EXCEEDS_BOUND
