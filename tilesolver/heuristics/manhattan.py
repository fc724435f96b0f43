from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tilesolver.domains.state import PuzzleState

def manhattan(s: "PuzzleState") -> int:
    """Sum of Manhattan distances to goal positions (blank ignored).

    Tile v belongs at (v // N, v % N), so the goal is 0, 1, ..., N*N-1 row-major.
    """
    n = s.n
    dist = 0
    for idx, tile in enumerate(s.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
