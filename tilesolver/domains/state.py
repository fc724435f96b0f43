from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from math import isqrt
from typing import Dict, Iterable, List, Sequence, Tuple

from tilesolver.heuristics.manhattan import manhattan

BLANK_GLYPH = "🗆"

@lru_cache(maxsize=None)
def _blank_moves(n: int) -> Dict[int, Tuple[int, ...]]:
    """Neighbor indices of every cell, in up/down/left/right order."""
    nei: Dict[int, Tuple[int, ...]] = {}
    for i in range(n * n):
        r, c = divmod(i, n)
        moves = []
        if r > 0:       moves.append(i - n)
        if r < n - 1:   moves.append(i + n)
        if c > 0:       moves.append(i - 1)
        if c < n - 1:   moves.append(i + 1)
        nei[i] = tuple(moves)
    return nei

@dataclass(frozen=True)
class PuzzleState:
    """An N×N sliding-tile board (0 is the blank), stored row-major.

    Immutable and hashable: every move yields a new state. Content is not
    validated here; see ``tilesolver.domains.board_io`` for parsing.
    """
    cells: Tuple[int, ...]
    n: int

    # ---------- construction ----------
    @classmethod
    def from_list(cls, values: Iterable[int]) -> "PuzzleState":
        cells = tuple(int(v) for v in values)
        return cls(cells, isqrt(len(cells)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "PuzzleState":
        return cls(tuple(int(v) for row in rows for v in row), len(rows))

    @classmethod
    def from_text(cls, text: str) -> "PuzzleState":
        rows = [line.split() for line in text.strip().splitlines() if line.strip()]
        return cls.from_rows(rows)

    @classmethod
    def goal(cls, n: int) -> "PuzzleState":
        return cls(tuple(range(n * n)), n)

    # ---------- rendering ----------
    def rows(self) -> List[Tuple[int, ...]]:
        n = self.n
        return [self.cells[r * n:(r + 1) * n] for r in range(n)]

    def to_text(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows())

    def render(self) -> str:
        """Boxed grid with the blank drawn as a glyph."""
        n = self.n
        w = max(3, len(str(n * n - 1)) + 2)
        out = ["┌" + "-" * (n * w + n - 1) + "┐"]
        for r, row in enumerate(self.rows()):
            cells = [(BLANK_GLYPH if v == 0 else str(v)).center(w) for v in row]
            out.append("|" + "|".join(cells) + "|")
            if r < n - 1:
                out.append("├" + "+".join(["-" * w] * n) + "┤")
        out.append("└" + "-" * (n * w + n - 1) + "┘")
        return "\n".join(out) + "\n"

    def __str__(self) -> str:
        return self.render()

    # ---------- core dynamics ----------
    @property
    def blank(self) -> int:
        """Index of the blank, -1 if the board has none."""
        try:
            return self.cells.index(0)
        except ValueError:
            return -1

    def is_goal(self) -> bool:
        # 0 sorts first, so "non-decreasing" is exactly the identity layout
        return all(a <= b for a, b in zip(self.cells, self.cells[1:]))

    def successors(self) -> List["PuzzleState"]:
        z = self.blank
        if z < 0:
            return []
        out: List[PuzzleState] = []
        for j in _blank_moves(self.n)[z]:
            lst = list(self.cells)
            lst[z], lst[j] = lst[j], lst[z]
            out.append(PuzzleState(tuple(lst), self.n))
        return out

    def heuristic(self) -> int:
        return manhattan(self)
