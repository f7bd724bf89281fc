"""Move validation: bounds, occupancy, and turn ownership."""

from .errors import InvalidMove


def check_move(move, board, color, current_color):
    """
    Validate a move for `color` when `current_color` is to play.
    Raises InvalidMove on invalid moves.
    """
    if color != current_color:
        raise InvalidMove(f"not {color.label}'s turn")

    row, col = move
    if not board.in_bounds(row, col):
        raise InvalidMove("Move out of bounds")
    if not board.is_empty(row, col):
        raise InvalidMove("Cell already occupied")

    return True
