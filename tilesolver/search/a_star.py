from __future__ import annotations
from typing import Callable, Dict, Optional
from time import perf_counter

from tilesolver.domains.state import PuzzleState
from tilesolver.search.frontier import PriorityFrontier
from tilesolver.search.node import Node

def _default_h(s: PuzzleState) -> int:
    return s.heuristic()

def a_star(
    start: PuzzleState,
    hfun: Optional[Callable[[PuzzleState], int]] = None,
    tie_break: str = "h",
    return_path: bool = True,
    timeout_sec: float | None = None,
):
    """
    Graph-search A* with instrumentation.

    The reached table maps each state to its cheapest known Node; a cheaper
    path evicts the stale Node from the frontier, and is queued again even if
    the state was already expanded, so an admissible but inconsistent heuristic
    still yields an optimal path.
    hfun defaults to the state's own heuristic (Manhattan).
    """
    h = hfun or _default_h
    t0 = perf_counter()

    frontier = PriorityFrontier(tie_break)
    root = Node(start, None, 0)
    f0 = root.score(h)
    frontier.push(root, f0, f0)
    reached: Dict[PuzzleState, Node] = {start: root}

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1

    def result(termination: str, node: Optional[Node] = None):
        return {
            "path": node.path() if (node is not None and return_path) else None,
            "g": node.cost if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "reached": len(reached),
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    while frontier:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return result("timeout")

        peak_open = max(peak_open, len(frontier))
        node = frontier.pop()
        if node.state.is_goal():
            return result("ok", node)

        expanded += 1
        for s2 in node.state.successors():
            child = Node(s2, node, node.cost + 1)
            generated += 1
            prev = reached.get(s2)
            if prev is None:
                reached[s2] = child
            elif child.cost < prev.cost:
                frontier.remove(prev)
                reached[s2] = child
            else:
                duplicates += 1
                continue
            f2 = child.score(h)
            frontier.push(child, f2, f2 - child.cost)

    # Open exhausted without finding goal
    return result("exhausted")
