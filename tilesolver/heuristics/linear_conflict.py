from __future__ import annotations
from bisect import bisect_left
from typing import TYPE_CHECKING, List

from tilesolver.heuristics.manhattan import manhattan

if TYPE_CHECKING:
    from tilesolver.domains.state import PuzzleState

def _line_penalty(goal_idx: List[int]) -> int:
    """2 per tile that must leave the line so the rest are in goal order.

    goal_idx: goal positions along the line of the tiles already in their goal
    line, in current order. Tiles that may stay = longest increasing subsequence.
    """
    tails: List[int] = []
    for g in goal_idx:
        k = bisect_left(tails, g)
        if k == len(tails):
            tails.append(g)
        else:
            tails[k] = g
    return 2 * (len(goal_idx) - len(tails))

def linear_conflict(s: "PuzzleState") -> int:
    """Manhattan + linear-conflict penalty over rows and columns."""
    N = s.n
    m = manhattan(s)
    # Row conflicts
    for r in range(N):
        row = s.cells[r * N:(r + 1) * N]
        m += _line_penalty([t % N for t in row if t != 0 and t // N == r])
    # Column conflicts
    for c in range(N):
        col = [s.cells[c + r * N] for r in range(N)]
        m += _line_penalty([t // N for t in col if t != 0 and t % N == c])
    return m
