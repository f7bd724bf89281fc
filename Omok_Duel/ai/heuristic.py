"""Local line-shape evaluation of a single candidate cell (open/closed twos to fives)."""

from collections import namedtuple

from ..Board import EMPTY, Color

DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

FIVE_SCORE = 100000
OFFENSE_WEIGHT = 1.1

# (count, open_ends) -> score; any other shape scores its stone count.
LINE_SCORES = {
    (4, 2): 10000,  # open four
    (4, 1): 1000,   # closed four
    (3, 2): 1000,   # open three
    (3, 1): 100,    # closed three
    (2, 2): 100,    # open two
    (2, 1): 10,     # closed two
}

LineShape = namedtuple("LineShape", ["count", "open_ends", "blocked"])


def scan_line(board, row, col, dr, dc, color):
    """
    Measure the line `color` would form through (row, col) along (dr, dc),
    counting the candidate itself as one of its stones.
    """
    count = 1
    open_ends = 0
    # Recorded but does not affect the score.
    blocked = False
    for sign in (1, -1):
        r, c = row + dr * sign, col + dc * sign
        consecutive = 0
        while board.in_bounds(r, c):
            value = board.cells[r][c]
            if value == color:
                consecutive += 1
            elif value == EMPTY:
                if consecutive > 0:
                    open_ends += 1
                break
            else:
                if consecutive == 0:
                    blocked = True
                break
            r += dr * sign
            c += dc * sign
        count += consecutive
    return LineShape(count, open_ends, blocked)


def shape_score(count, open_ends):
    if count >= 5:
        return FIVE_SCORE
    return LINE_SCORES.get((count, open_ends), count)


def evaluate_line(board, row, col, dr, dc, color):
    shape = scan_line(board, row, col, dr, dc, color)
    return shape_score(shape.count, shape.open_ends)


def evaluate_position(board, row, col, color=Color.WHITE, offense_weight=OFFENSE_WEIGHT):
    """
    Score an empty cell for `color`: its own line scores weighted by
    `offense_weight` plus the opponent's line scores through the same cell.
    """
    color = Color(color)
    own = 0
    opp = 0
    for dr, dc in DIRECTIONS:
        own += evaluate_line(board, row, col, dr, dc, color.value)
        opp += evaluate_line(board, row, col, dr, dc, color.opponent.value)
    return own * offense_weight + opp
