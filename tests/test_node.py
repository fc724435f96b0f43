import pytest

from tilesolver.domains.state import PuzzleState
from tilesolver.heuristics.linear_conflict import linear_conflict
from tilesolver.search.a_star import a_star
from tilesolver.search.ida_star import ida_star
from tilesolver.search.node import Node

def _chain(states):
    node = None
    for cost, s in enumerate(states):
        node = Node(s, node, cost)
    return node

def test_root_path_is_itself(goal3):
    assert Node(goal3).path() == [goal3]

def test_path_runs_from_root(one_move, goal3):
    start = PuzzleState.from_text("3 1 2\n0 4 5\n6 7 8")
    leaf = _chain([one_move, goal3, start])
    assert leaf.path() == [one_move, goal3, start]
    assert leaf.cost == 2

def test_score_is_cost_plus_heuristic(shifted):
    node = Node(shifted, None, 5)
    assert node.score() == 5 + 12
    assert node.score(linear_conflict) == 5 + linear_conflict(shifted)

def test_siblings_share_their_parent(goal3):
    root = Node(goal3)
    a, b = (Node(s, root, 1) for s in goal3.successors())
    assert a.parent is b.parent is root

def test_undo_move_is_an_immediate_repeat(goal3, one_move):
    root = Node(goal3)
    child = Node(one_move, root, 1)
    back = Node(goal3, child, 2)
    assert not root.has_immediate_repeat()
    assert not child.has_immediate_repeat()
    assert back.has_immediate_repeat()

def test_same_state_as_parent_is_an_immediate_repeat(goal3):
    assert Node(goal3, Node(goal3), 1).has_immediate_repeat()

def test_longer_cycles_are_not_detected():
    # walking the blank clockwise round a 2x2 board returns to the start after 12 moves
    start = PuzzleState((0, 1, 2, 3), 2)
    node = Node(start)
    for target in [1, 3, 2, 0] * 3:
        s2 = next(s for s in node.state.successors() if s.blank == target)
        node = Node(s2, node, node.cost + 1)
        assert not node.has_immediate_repeat()
    assert node.state == start
    assert node.cost == 12

@pytest.mark.parametrize("engine", [a_star, ida_star])
def test_engines_rank_nodes_by_score(engine, shifted, monkeypatch):
    calls = []
    real = Node.score

    def counting(self, hfun=None):
        calls.append(self.state)
        return real(self, hfun)

    monkeypatch.setattr(Node, "score", counting)
    res = engine(shifted, linear_conflict)
    assert res["termination"] == "ok"
    assert calls[0] == shifted
    assert len(calls) >= res["expanded"]
