"""Candidate generation (neighbour filter) and last-move ordering."""

from Gobang_AI.Board import Board, AI, HUMAN
from Gobang_AI.ai import move_selector


def test_single_stone_yields_exactly_its_eight_neighbours():
    b = Board()
    b.place(AI, (7, 7))
    cands = move_selector.generate_candidates(b)
    expected = {(7 + dr, 7 + dc) for dr, dc in move_selector.NEIGHBORS_8}
    assert len(cands) == 8
    assert set(cands) == expected


def test_neighbours_of_last_move_are_moved_to_front():
    b = Board()
    b.place(AI, (7, 7))
    cands = move_selector.generate_candidates(b)
    # each neighbour is pulled to the front in scan order, so the last scanned leads
    assert cands == [(8, 8), (8, 7), (8, 6), (7, 8), (7, 6), (6, 8), (6, 7), (6, 6)]


def test_ordering_only_reorders():
    b = Board()
    b.place(AI, (2, 2))
    b.place(HUMAN, (10, 10))
    cands = move_selector.generate_candidates(b)
    assert len(cands) == 16
    assert len(set(cands)) == 16
    near_last = {(10 + dr, 10 + dc) for dr, dc in move_selector.NEIGHBORS_8}
    assert set(cands[:8]) == near_last
    assert all(max(abs(r - 2), abs(c - 2)) == 1 for r, c in cands[8:])


def test_empty_board_has_no_candidates():
    assert move_selector.generate_candidates(Board()) == []


def test_corner_stone_and_has_neighbor():
    b = Board()
    b.place(HUMAN, (0, 0))
    assert set(move_selector.generate_candidates(b)) == {(0, 1), (1, 0), (1, 1)}
    assert move_selector.has_neighbor(b, 1, 1)
    assert not move_selector.has_neighbor(b, 2, 2)
    assert not move_selector.has_neighbor(b, 0, 0)


def test_order_moves_without_history_is_identity():
    b = Board()
    cells = [(3, 3), (1, 1), (2, 2)]
    assert move_selector.order_moves(b, cells) == cells
