from __future__ import annotations
from typing import List, Sequence, Union

from .errors import ResourceExhausted

Text = Union[str, bytes, Sequence]

# Position-weighted insertion/deletion distance.
#
# Inserting or deleting the character at 1-based position k costs 1/k, so an
# edit near the start of a name is expensive and an edit near the end is
# cheap. There is no substitution: two differing characters are reconciled
# by a delete plus an insert, each priced by its own position.
#
#   d("table", "tab")   == 1/4 + 1/5
#   d("table", "able")  == 1.0
#
# Only `+` and `min` on IEEE doubles are used, in the same order on every
# call, so results are reproducible bit for bit.


def flip(n: int) -> float:
    """Cost of an insertion or deletion at 1-based position n."""
    return 1.0 / n


def string_distance(a: Text, b: Text) -> float:
    """
    Distance between a and b using two rolling rows.

    Works on str, bytes or any indexable sequence whose items compare with ==.
    Memory: O(min(len(a), len(b))).
    Raises ResourceExhausted if memory runs out.
    """
    try:
        return _rolling(a, b)
    except MemoryError as exc:
        raise ResourceExhausted() from exc


def string_distance_matrix(a: Text, b: Text) -> float:
    """
    Same metric over the full (len(a)+1) x (len(b)+1) grid.

    Kept as a cross-check for string_distance; the matcher never calls it.
    """
    try:
        return _matrix(a, b)
    except MemoryError as exc:
        raise ResourceExhausted() from exc


def _rolling(a: Text, b: Text) -> float:
    # keep the shorter string along the row
    if len(b) > len(a):
        a, b = b, a

    H = len(a) + 1
    W = len(b) + 1

    oldrow: List[float] = [0.0] * W
    newrow: List[float] = [0.0] * W

    for j in range(1, W):
        oldrow[j] = flip(j) + oldrow[j - 1]

    for i in range(1, H):
        ca = a[i - 1]
        cost_i = flip(i)
        newrow[0] = cost_i + oldrow[0]
        for j in range(1, W):
            if ca == b[j - 1]:
                newrow[j] = oldrow[j - 1]
            else:
                newrow[j] = min(cost_i + oldrow[j], flip(j) + newrow[j - 1])
        oldrow, newrow = newrow, oldrow

    return oldrow[W - 1]


def _matrix(a: Text, b: Text) -> float:
    grid = [[0.0] * (len(b) + 1) for _ in range(len(a) + 1)]

    for i in range(1, len(a) + 1):
        grid[i][0] = flip(i) + grid[i - 1][0]
    for j in range(1, len(b) + 1):
        grid[0][j] = flip(j) + grid[0][j - 1]

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                grid[i][j] = grid[i - 1][j - 1]
            else:
                grid[i][j] = min(flip(i) + grid[i - 1][j], flip(j) + grid[i][j - 1])

    return grid[len(a)][len(b)]


def format_distance(d: float) -> str:
    """Shortest round-trip form, integral values without a trailing '.0'."""
    s = repr(float(d))
    return s[:-2] if s.endswith(".0") else s
