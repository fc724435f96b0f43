import dataclasses

import pytest

from tilesolver.domains.state import BLANK_GLYPH, PuzzleState

def test_state_with_last_zero_is_not_goal(shifted):
    assert not shifted.is_goal()

def test_state_with_leading_zero_and_sorted_is_goal(goal3):
    assert goal3.is_goal()
    assert goal3 == PuzzleState.from_text("0 1 2\n3 4 5\n6 7 8")

def test_state_with_leading_zero_and_unsorted_is_not_goal():
    assert not PuzzleState.from_text("0 1 2\n3 4 5\n6 8 7").is_goal()

def test_goal_has_heuristic_zero(goal3):
    assert goal3.heuristic() == 0

def test_one_step_away_has_heuristic_one(one_move):
    assert one_move.heuristic() == 1

def test_shifted_heuristic(shifted):
    # six tiles one step off, two (3 and 6) wrap to the next row
    assert shifted.heuristic() == 12

@pytest.mark.parametrize("text,count", [
    ("0 1 2\n3 4 5\n6 7 8", 2),
    ("1 2 0\n3 4 5\n6 7 8", 2),
    ("1 2 3\n4 5 6\n0 7 8", 2),
    ("1 2 3\n4 5 6\n7 8 0", 2),
    ("1 0 2\n3 4 5\n6 7 8", 3),
    ("1 2 3\n0 4 5\n6 7 8", 3),
    ("1 2 3\n4 0 5\n6 7 8", 4),
])
def test_successor_count_3x3(text, count):
    assert len(PuzzleState.from_text(text).successors()) == count

@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_successor_count_by_blank_position(n):
    for z in range(n * n):
        cells = list(range(1, n * n))
        cells.insert(z, 0)
        s = PuzzleState(tuple(cells), n)
        r, c = divmod(z, n)
        on_edge = (r in (0, n - 1)) + (c in (0, n - 1))
        assert len(s.successors()) == 4 - on_edge

def test_successors_order_up_down_left_right():
    s = PuzzleState.from_text("1 2 3\n4 0 5\n6 7 8")
    assert s.successors() == [
        PuzzleState.from_text("1 0 3\n4 2 5\n6 7 8"),
        PuzzleState.from_text("1 2 3\n4 7 5\n6 0 8"),
        PuzzleState.from_text("1 2 3\n0 4 5\n6 7 8"),
        PuzzleState.from_text("1 2 3\n4 5 0\n6 7 8"),
    ]

def test_corner_successors(goal3):
    assert goal3.successors() == [
        PuzzleState.from_text("3 1 2\n0 4 5\n6 7 8"),
        PuzzleState.from_text("1 0 2\n3 4 5\n6 7 8"),
    ]

def test_successors_differ_by_one_swap(scrambles):
    for s in scrambles(4, [5, 9]):
        for s2 in s.successors():
            diff = [i for i, (a, b) in enumerate(zip(s.cells, s2.cells)) if a != b]
            assert len(diff) == 2
            assert s.blank in diff and s2.blank in diff
            assert sorted(s.cells) == sorted(s2.cells)

def test_successors_do_not_mutate(one_move):
    before = one_move.cells
    one_move.successors()
    assert one_move.cells == before

def test_goal_iff_heuristic_zero(scrambles):
    for s in scrambles(3, [0, 1, 2, 6, 10]):
        assert s.is_goal() == (s.heuristic() == 0)

def test_equal_states_hash_alike():
    s1 = PuzzleState.from_text("1 2 3\n4 5 6\n7 8 0")
    s2 = PuzzleState.from_list([1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert s1 == s2
    assert {s1: 1}[s2] == 1

def test_state_is_immutable(goal3):
    with pytest.raises(dataclasses.FrozenInstanceError):
        goal3.cells = (1,)

def test_text_round_trip(scrambles, one_move):
    assert one_move.to_text() == "1 0 2\n3 4 5\n6 7 8"
    for s in scrambles(4, [7, 15]):
        assert PuzzleState.from_text(s.to_text()) == s

def test_from_list_infers_side():
    assert PuzzleState.from_list(range(16)).n == 4
    assert PuzzleState.from_list(range(16)) == PuzzleState.goal(4)

def test_render_draws_box_and_blank(one_move):
    text = one_move.render()
    lines = text.splitlines()
    assert lines[0] == "┌-----------┐"
    assert lines[1] == f"| 1 | {BLANK_GLYPH} | 2 |"
    assert lines[2] == "├---+---+---┤"
    assert lines[-1] == "└-----------┘"
    assert str(one_move) == text

def test_render_widens_for_two_digit_tiles():
    lines = PuzzleState.goal(4).render().splitlines()
    assert all(len(line) == len(lines[0]) for line in lines)
    assert "15" in lines[-2]

def test_empty_board_is_goal_without_moves():
    s = PuzzleState.from_list([])
    assert s.is_goal()
    assert s.successors() == []
    assert s.heuristic() == 0
    assert s.blank == -1
