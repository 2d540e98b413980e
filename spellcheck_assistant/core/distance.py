# distance.py
# Levenshtein edit distance used as the metric for the BK-tree.
# The tree's pruning rule relies on the metric properties (identity,
# symmetry, triangle inequality), so any replacement metric must keep them.

from typing import Callable, List

DistanceMetric = Callable[[str, str], int]


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn `a` into `b`.
    Full (len(a)+1) x (len(b)+1) dynamic programming table.
    """
    if a == b:
        return 0

    la, lb = len(a), len(b)
    if la == 0:
        return lb
    if lb == 0:
        return la

    table: List[List[int]] = [[0] * (lb + 1) for _ in range(la + 1)]
    for i in range(la + 1):
        table[i][0] = i
    for j in range(lb + 1):
        table[0][j] = j

    for i in range(1, la + 1):
        ca = a[i - 1]
        row = table[i]
        prev = table[i - 1]
        for j in range(1, lb + 1):
            cost = 0 if ca == b[j - 1] else 1
            delete = prev[j] + 1
            insert = row[j - 1] + 1
            replace = prev[j - 1] + cost
            val = delete if delete < insert else insert
            if replace < val:
                val = replace
            row[j] = val

    return table[la][lb]
