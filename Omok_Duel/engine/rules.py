"""Win detection (five or more in a row) and draw checks."""

from ..Board import EMPTY

AXES = ((0, 1), (1, 0), (1, 1), (1, -1))


def line_through(board, row, col, dr, dc):
    """
    Return the contiguous run of the stone at (row, col) along axis (dr, dc),
    ordered from one end of the axis to the other.
    """
    color = board.cells[row][col]
    backward = board.count_dir(row, col, -dr, -dc, color)
    forward = board.count_dir(row, col, dr, dc, color)
    start_r, start_c = row - dr * backward, col - dc * backward
    return [(start_r + dr * i, start_c + dc * i) for i in range(backward + forward + 1)]


def winning_line(board, row, col):
    """
    Check the four axes through a just-placed stone. Return the first line of
    five or more (origin included) or None.
    """
    if board.cells[row][col] == EMPTY:
        return None
    for dr, dc in AXES:
        line = line_through(board, row, col, dr, dc)
        if len(line) >= 5:
            return line
    return None


def is_win_after_move(board, row, col):
    """Assumes stone is already placed."""
    return winning_line(board, row, col) is not None


def is_draw(board):
    """Board full with no further placement possible."""
    return board.is_full()
