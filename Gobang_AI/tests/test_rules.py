"""Five-in-a-row detection in all four directions, with bounds."""

import pytest

from Gobang_AI.Board import Board, AI, HUMAN
from Gobang_AI.engine import gobang_rules


def test_horizontal_five():
    assert gobang_rules.has_five_in_a_row({(7, c) for c in range(5)})
    assert not gobang_rules.has_five_in_a_row({(7, c) for c in range(4)})


def test_vertical_five():
    assert gobang_rules.has_five_in_a_row({(r, 3) for r in range(10, 15)})
    assert not gobang_rules.has_five_in_a_row({(r, 3) for r in (10, 11, 12, 14)})


def test_diagonal_and_anti_diagonal_five():
    assert gobang_rules.has_five_in_a_row({(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)})
    assert gobang_rules.has_five_in_a_row({(0, 4), (1, 3), (2, 2), (3, 1), (4, 0)})


def test_five_touching_far_edges():
    assert gobang_rules.has_five_in_a_row({(14, c) for c in range(10, 15)})
    assert gobang_rules.has_five_in_a_row({(10, 14), (11, 13), (12, 12), (13, 11), (14, 10)})


def test_no_wrap_around_board_edge():
    stones = {(0, 12), (0, 13), (0, 14), (1, 0), (1, 1)}
    assert not gobang_rules.has_five_in_a_row(stones)


def test_overline_counts_as_win():
    assert gobang_rules.has_five_in_a_row({(5, c) for c in range(2, 8)})


def test_winner_reports_side():
    b = Board()
    assert gobang_rules.winner(b) is None
    for c in range(5):
        b.place(HUMAN, (2, c))
    b.place(AI, (9, 9))
    assert gobang_rules.winner(b) == HUMAN


def test_simulate_undoes_even_on_error():
    b = Board()
    b.place(AI, (7, 7))
    with pytest.raises(RuntimeError):
        with gobang_rules.simulate(b, HUMAN, (7, 8)):
            assert (7, 8) in b.occupied
            raise RuntimeError("boom")
    assert b.history == [(7, 7)]
    assert (7, 8) not in b.occupied
