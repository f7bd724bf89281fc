"""Hard opponent: one-ply greedy choice over heuristic cell scores."""

import logging

from . import heuristic, move_selector

LOGGER = logging.getLogger(__name__)


def choose_move(board, color, radius=move_selector.HARD_RADIUS, offense_weight=heuristic.OFFENSE_WEIGHT, stats=None):
    """
    Score every pruned candidate and return the best (row, col).
    Ties keep the first cell in row-major order. Empty board returns the
    center; a full board returns None.
    """
    candidates = move_selector.generate_candidates(board, radius)
    if not candidates:
        if board.is_board_empty():
            return move_selector.center(board)
        if board.is_full():
            return None
        # Stones exist but none near an empty cell: only possible with radius 0.
        candidates = move_selector.empty_cells(board)

    best_score = float("-inf")
    best_move = None
    for r, c in candidates:
        score = heuristic.evaluate_position(board, r, c, color, offense_weight=offense_weight)
        if score > best_score:
            best_score = score
            best_move = (r, c)

    if stats is not None:
        stats.append({"candidates": len(candidates), "best": best_move, "score": best_score})
    LOGGER.debug("greedy pick %s score=%.1f over %d candidates", best_move, best_score, len(candidates))
    return best_move
