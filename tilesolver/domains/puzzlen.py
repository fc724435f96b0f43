from __future__ import annotations
import random

from tilesolver.domains.state import PuzzleState, _blank_moves

class NPuzzle:
    """Instance generation for the N×N sliding-tile puzzle (goal 0, 1, ..., N*N-1)."""
    def __init__(self, n: int):
        assert n >= 2
        self.N = n
        self.size = n * n
        self.GOAL = PuzzleState.goal(n)
        self._nei = _blank_moves(n)

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> PuzzleState:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        cells = self.GOAL.cells
        last_blank = None
        for _ in range(depth):
            z = cells.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(cells)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            cells = tuple(lst)
        return PuzzleState(cells, self.N)

    # ---------- solvability ----------
    def is_solvable(self, s: PuzzleState) -> bool:
        """Parity rule, valid for every N:
           permutation parity (blank included) must match the parity of the
           blank's Manhattan distance from its goal cell (top-left).
        """
        arr = s.cells
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        r, c = divmod(s.blank, self.N)
        return (inv % 2) == ((r + c) % 2)

def make_unsolvable_variant(s: PuzzleState) -> PuzzleState:
    """Swap the first two non-blank tiles (flips permutation parity)."""
    lst = list(s.cells)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return PuzzleState(tuple(lst), s.n)
