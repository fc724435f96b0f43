import pytest

from tilesolver.domains.state import PuzzleState
from tilesolver.search.solve import SOLVERS, NoSolutionError, solve_best_first, solve_iterative_deepening

ENGINES = [solve_best_first, solve_iterative_deepening]

@pytest.mark.parametrize("solve", ENGINES)
def test_one_move_example(solve, one_move):
    path = solve(one_move)
    assert len(path) == 2
    assert path[-1] == PuzzleState.from_text("0 1 2\n3 4 5\n6 7 8")

@pytest.mark.parametrize("solve", ENGINES)
def test_goal_example(solve, goal3):
    assert goal3.is_goal() and goal3.heuristic() == 0
    assert solve(goal3) == [goal3]

def test_shifted_example_engines_agree(shifted):
    a = solve_best_first(shifted)
    i = solve_iterative_deepening(shifted)
    assert len(a) == len(i)
    assert a[0] == i[0] == shifted
    assert a[-1].is_goal() and i[-1].is_goal()

@pytest.mark.parametrize("solve", ENGINES)
def test_no_solution_is_repeatable(solve, no_blank):
    for _ in range(2):
        with pytest.raises(NoSolutionError, match="No solution found"):
            solve(no_blank)

def test_unsolvable_best_first(unsolvable2):
    with pytest.raises(NoSolutionError):
        solve_best_first(unsolvable2)

def test_unsolvable_iterative_deepening_with_bound(unsolvable2):
    with pytest.raises(NoSolutionError, match="bound"):
        solve_iterative_deepening(unsolvable2, max_bound=16)

def test_solver_registry(one_move):
    assert set(SOLVERS) == {"astar", "idastar"}
    assert SOLVERS["astar"](one_move) == SOLVERS["idastar"](one_move)
