from __future__ import annotations
from typing import Callable, Dict, List, Optional

from tilesolver.domains.state import PuzzleState
from tilesolver.search.a_star import a_star
from tilesolver.search.ida_star import ida_star

class NoSolutionError(RuntimeError):
    """The search terminated without reaching the goal."""

def _path_or_raise(res) -> List[PuzzleState]:
    if res["path"] is None:
        raise NoSolutionError(f"No solution found ({res['algorithm']}: {res['termination']})")
    return res["path"]

def solve_best_first(start: PuzzleState) -> List[PuzzleState]:
    """Optimal move sequence from start to goal, both included, via A*."""
    return _path_or_raise(a_star(start))

def solve_iterative_deepening(start: PuzzleState, max_bound: Optional[int] = None) -> List[PuzzleState]:
    """Optimal move sequence from start to goal, both included, via IDA*."""
    return _path_or_raise(ida_star(start, max_bound=max_bound))

SOLVERS: Dict[str, Callable[[PuzzleState], List[PuzzleState]]] = {
    "astar": solve_best_first,
    "idastar": solve_iterative_deepening,
}
