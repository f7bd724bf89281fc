"""Win detection on all four axes, including blocked fours and overlines."""

import pytest

from Omok_Duel.Board import Board, Color
from Omok_Duel.engine import referee, rules
from Omok_Duel.engine.errors import InvalidMove


@pytest.mark.parametrize(
    "cells",
    [
        [(7, c) for c in range(3, 8)],            # horizontal
        [(r, 2) for r in range(10, 15)],          # vertical at the edge
        [(i, i) for i in range(5)],               # diagonal
        [(4 + i, 10 - i) for i in range(5)],      # anti-diagonal
    ],
)
def test_five_in_a_row_on_every_axis(cells):
    b = Board()
    for r, c in cells:
        b.place(r, c, Color.BLACK)
    middle = cells[2]
    line = rules.winning_line(b, *middle)
    assert line is not None
    assert sorted(line) == sorted(cells)


def test_winning_line_is_ordered_along_axis():
    b = Board()
    for c in (5, 6, 8, 9):
        b.place(2, c, Color.WHITE)
    b.place(2, 7, Color.WHITE)
    assert rules.winning_line(b, 2, 7) == [(2, 5), (2, 6), (2, 7), (2, 8), (2, 9)]


def test_blocked_four_is_not_a_win():
    b = Board()
    b.place(7, 2, Color.WHITE)
    for c in range(3, 7):
        b.place(7, c, Color.BLACK)
    b.place(7, 7, Color.WHITE)
    assert rules.winning_line(b, 7, 5) is None


def test_overline_wins():
    b = Board()
    for c in range(6):
        b.place(0, c, Color.BLACK)
    assert len(rules.winning_line(b, 0, 5)) == 6


def test_mixed_colors_do_not_chain():
    b = Board()
    for c in range(4):
        b.place(3, c, Color.BLACK)
    b.place(3, 4, Color.WHITE)
    assert not rules.is_win_after_move(b, 3, 4)
    assert not rules.is_win_after_move(b, 3, 3)


def test_referee_rejects_wrong_turn_and_occupied():
    b = Board()
    b.place(7, 7, Color.BLACK)
    with pytest.raises(InvalidMove):
        referee.check_move((0, 0), b, Color.BLACK, Color.WHITE)
    with pytest.raises(InvalidMove):
        referee.check_move((7, 7), b, Color.WHITE, Color.WHITE)
    assert referee.check_move((0, 0), b, Color.WHITE, Color.WHITE) is True
