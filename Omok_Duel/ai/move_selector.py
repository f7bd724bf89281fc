"""Candidate move generation (neighborhood pruning, adjacency counts)."""

HARD_RADIUS = 2


def empty_cells(board):
    """All empty cells in row-major order."""
    return list(board.empty_cells())


def adjacency_scores(board, cells=None):
    """Map each empty cell to the number of stones in its 8-neighborhood."""
    cells = empty_cells(board) if cells is None else cells
    return {(r, c): board.count_neighbors(r, c) for r, c in cells}


def generate_candidates(board, radius=HARD_RADIUS):
    """
    Empty cells with at least one stone within Chebyshev distance `radius`,
    in row-major order. Empty board yields no candidates.
    """
    if board.is_board_empty():
        return []
    return [(r, c) for r, c in board.empty_cells() if board.has_neighbor(r, c, radius)]


def center(board):
    mid = board.size // 2
    return mid, mid
