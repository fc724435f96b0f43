import pytest

from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.domains.state import PuzzleState

@pytest.fixture
def goal3():
    return PuzzleState.goal(3)

@pytest.fixture
def one_move():
    return PuzzleState.from_text("1 0 2\n3 4 5\n6 7 8")

@pytest.fixture
def shifted():
    # blank bottom-right, every tile one cell behind its goal
    return PuzzleState.from_text("1 2 3\n4 5 6\n7 8 0")

@pytest.fixture
def no_blank():
    # no blank and not sorted: no moves, never the goal
    return PuzzleState((2, 1, 3, 4), 2)

@pytest.fixture
def unsolvable2():
    return PuzzleState.from_text("0 2\n1 3")

@pytest.fixture
def scrambles():
    def make(n, depths, seeds=range(3)):
        dom = NPuzzle(n)
        return [dom.scramble(d, seed) for d in depths for seed in seeds]
    return make

def is_valid_path(path):
    return all(b in a.successors() for a, b in zip(path, path[1:]))
