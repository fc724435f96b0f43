from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional

from tilesolver.domains.state import PuzzleState

Heuristic = Callable[[PuzzleState], int]

@dataclass(frozen=True, eq=False)
class Node:
    """Search-tree node. ``parent`` is shared by every child generated from it,
    so an ancestor lives as long as any descendant is still referenced."""
    state: PuzzleState
    parent: Optional["Node"] = None
    cost: int = 0

    def path(self) -> List[PuzzleState]:
        """States from the root to this node, inclusive."""
        path: List[PuzzleState] = []
        node: Optional[Node] = self
        while node is not None:
            path.append(node.state)
            node = node.parent
        path.reverse()
        return path

    def score(self, hfun: Optional[Heuristic] = None) -> int:
        h = hfun(self.state) if hfun is not None else self.state.heuristic()
        return self.cost + h

    def has_immediate_repeat(self) -> bool:
        """True if this node repeats its parent's or grandparent's state.

        Only catches the one-move undo; longer cycles (e.g. a four-move loop
        around a 2×2 block) are not detected.
        """
        p = self.parent
        if p is None:
            return False
        if p.state == self.state:
            return True
        return p.parent is not None and p.parent.state == self.state
