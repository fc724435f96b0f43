from __future__ import annotations
import heapq
import itertools
from typing import Dict, List, Tuple

from tilesolver.domains.state import PuzzleState
from tilesolver.search.node import Node

TIE_BREAKS = ("h", "g", "fifo", "lifo")

class PriorityFrontier:
    """Min-heap of Nodes keyed by f, with removal of an arbitrary entry.

    Removal marks the heap entry dead and lets ``pop`` skip it. At most one
    live entry exists per state (the reached table guarantees it).

    tie_break orders equal-f entries:
      h    - smaller h first
      g    - larger g first (deeper nodes)
      fifo - older first
      lifo - newer first
    The insertion counter is always the final key, so order is deterministic.
    """
    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[list] = []
        self._entries: Dict[PuzzleState, list] = {}
        self._counter = itertools.count()

    def _priority(self, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def push(self, node: Node, f: int, h: int) -> None:
        if node.state in self._entries:
            self.remove(self._entries[node.state][-1])
        entry = [self._priority(f, node.cost, h, next(self._counter)), node]
        self._entries[node.state] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, node: Node) -> bool:
        """Evict ``node`` if it is the live entry for its state."""
        entry = self._entries.get(node.state)
        if entry is None or entry[-1] is not node:
            return False
        del self._entries[node.state]
        entry[-1] = None
        return True

    def pop(self) -> Node:
        while self._heap:
            _, node = heapq.heappop(self._heap)
            if node is not None:
                del self._entries[node.state]
                return node
        raise KeyError("pop from an empty frontier")

    def __contains__(self, state: PuzzleState) -> bool:
        return state in self._entries

    def __len__(self) -> int:
        return len(self._entries)
