"""Easy and hard move policies and candidate pruning."""

import random

from Omok_Duel.Board import Board, Color
from Omok_Duel.ai import move_selector, search_easy, search_greedy


class ScriptedRng:
    """Deterministic stand-in for random.Random."""

    def __init__(self, roll):
        self.roll = roll
        self.choices = []

    def random(self):
        return self.roll

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[0]


def _board(black=(), white=()):
    b = Board()
    for r, c in black:
        b.place(r, c, Color.BLACK)
    for r, c in white:
        b.place(r, c, Color.WHITE)
    return b


def test_hard_on_empty_board_plays_center():
    assert search_greedy.choose_move(Board(), Color.WHITE) == (7, 7)


def test_hard_candidates_after_first_stone():
    b = _board(black=[(7, 7)])
    candidates = move_selector.generate_candidates(b, radius=2)
    expected = {(r, c) for r in range(5, 10) for c in range(5, 10)} - {(7, 7)}
    assert len(candidates) == 24
    assert set(candidates) == expected
    move = search_greedy.choose_move(b, Color.WHITE)
    assert move in expected
    # Adjacent cells tie; row-major order keeps the first.
    assert move == (6, 6)


def test_hard_blocks_four():
    b = _board(black=[(7, 7), (7, 8), (7, 9), (7, 10)], white=[(8, 8), (8, 9), (6, 8)])
    assert search_greedy.choose_move(b, Color.WHITE) == (7, 6)


def test_hard_prefers_own_five_over_block():
    b = _board(
        black=[(10, 3), (10, 4), (10, 5), (10, 6)],
        white=[(3, 3), (3, 4), (3, 5), (3, 6)],
    )
    assert search_greedy.choose_move(b, Color.WHITE) in {(3, 2), (3, 7)}


def test_hard_records_stats_and_avoids_occupied():
    b = _board(black=[(0, 0), (1, 1)], white=[(0, 1)])
    stats = []
    move = search_greedy.choose_move(b, Color.WHITE, stats=stats)
    assert b.is_empty(*move)
    assert b.has_neighbor(*move, 2)
    assert stats and stats[0]["best"] == move


def test_easy_prefers_crowded_cells():
    b = _board(black=[(7, 7)], white=[(7, 8)])
    rng = ScriptedRng(roll=0.9)
    move = search_easy.choose_move(b, rng=rng)
    assert move == (6, 7)
    assert set(rng.choices[0]) == {(6, 7), (6, 8), (8, 7), (8, 8)}


def test_easy_random_branch_uses_all_empty_cells():
    b = _board(black=[(7, 7)])
    rng = ScriptedRng(roll=0.1)
    move = search_easy.choose_move(b, rng=rng)
    assert len(rng.choices[0]) == 224
    assert b.is_empty(*move)


def test_easy_empty_board_ties_everywhere():
    rng = ScriptedRng(roll=0.9)
    assert search_easy.choose_move(Board(), rng=rng) == (0, 0)
    assert len(rng.choices[0]) == 225


def test_easy_never_selects_occupied():
    b = _board(black=[(r, c) for r in range(15) for c in range(15) if (r + c) % 3 == 0])
    rng = random.Random(7)
    for _ in range(50):
        assert b.is_empty(*search_easy.choose_move(b, rng=rng))


def test_full_board_has_no_move():
    b = Board(size=3)
    for r in range(3):
        for c in range(3):
            b.place(r, c, Color.BLACK if (r + c) % 2 else Color.WHITE)
    assert search_easy.choose_move(b, rng=random.Random(0)) is None
    assert search_greedy.choose_move(b, Color.WHITE) is None
