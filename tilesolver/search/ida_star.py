from __future__ import annotations
from typing import Callable, List, Optional, Tuple
from time import perf_counter
import math

from tilesolver.domains.state import PuzzleState
from tilesolver.search.node import Node

def _default_h(s: PuzzleState) -> int:
    return s.heuristic()

def ida_star(
    start: PuzzleState,
    hfun: Optional[Callable[[PuzzleState], int]] = None,
    return_path: bool = True,
    max_bound: Optional[int] = None,
    timeout_sec: float | None = None,
):
    """
    IDA* over an explicit depth-first stack, with instrumentation.

    Each iteration expands only nodes with f <= bound and records the smallest
    f that exceeded it; that value becomes the next bound. Children that undo
    the previous move are dropped (counted as duplicates). Nothing else is
    remembered between iterations, so longer cycles are re-walked until the
    bound cuts them off.

    max_bound: stop with termination "bound" once the next bound would exceed it.
    """
    h = hfun or _default_h
    t0 = perf_counter()
    TIMEOUT = object()

    expanded = 0
    generated = 0
    duplicates = 0
    peak_stack = 0
    iterations = 0

    def bounded_dfs(root: Node, bound: int) -> Tuple[object, float]:
        """Returns (goal node | None | TIMEOUT, smallest f above bound)."""
        nonlocal expanded, generated, duplicates, peak_stack
        min_excess = math.inf
        stack: List[Node] = [root]
        while stack:
            if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
                return TIMEOUT, min_excess
            peak_stack = max(peak_stack, len(stack))
            node = stack.pop()
            f = node.score(h)
            if f > bound:
                if f < min_excess:
                    min_excess = f
                continue
            if node.state.is_goal():
                return node, min_excess

            expanded += 1
            children = [Node(s2, node, node.cost + 1) for s2 in node.state.successors()]
            # reversed so the first successor is popped first
            for child in reversed(children):
                if child.has_immediate_repeat():
                    duplicates += 1
                    continue
                generated += 1
                stack.append(child)
        return None, min_excess

    def result(termination: str, bound: int, node: Optional[Node] = None):
        return {
            "path": node.path() if (node is not None and return_path) else None,
            "g": node.cost if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_stack": peak_stack,
            "iterations": iterations,
            "bound_final": bound,
            "time": perf_counter() - t0,
            "algorithm": "IDA*",
            "termination": termination,
        }

    root = Node(start, None, 0)
    bound = h(start)

    while True:
        iterations += 1
        found, t = bounded_dfs(root, bound)
        if found is TIMEOUT:
            return result("timeout", bound)
        if found is not None:
            return result("ok", bound, found)  # type: ignore[arg-type]
        if math.isinf(t) or t <= bound:
            return result("exhausted", bound)
        if max_bound is not None and t > max_bound:
            return result("bound", bound)
        bound = int(t)
