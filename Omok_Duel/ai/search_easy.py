"""Easy opponent: occasional random play, otherwise hug existing stones."""

import random

from . import move_selector

RANDOM_CHANCE = 0.3


def choose_move(board, rng=None, random_chance=RANDOM_CHANCE):
    """
    Return an empty (row, col), or None when the board is full.
    With probability `random_chance` pick any empty cell; otherwise pick among
    the cells with the most adjacent stones.
    """
    rng = rng or random
    cells = move_selector.empty_cells(board)
    if not cells:
        return None

    if rng.random() < random_chance:
        return rng.choice(cells)

    scores = move_selector.adjacency_scores(board, cells)
    best = max(scores.values())
    top = [cell for cell in cells if scores[cell] == best]
    return rng.choice(top)
