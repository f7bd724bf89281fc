"""Board state container: stone placement, removal, and neighbor queries."""

from enum import IntEnum

from .engine.errors import InvalidMove

SIZE = 15
EMPTY = 0


class Color(IntEnum):
    # Cells store -1 (black), 0 (empty), 1 (white)
    BLACK = -1
    WHITE = 1

    @property
    def opponent(self):
        return Color(-self.value)

    @property
    def short(self):
        return "B" if self is Color.BLACK else "W"

    @property
    def label(self):
        return "Black" if self is Color.BLACK else "White"


class Board:
    def __init__(self, size=SIZE):
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.stone_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_board_empty(self):
        return self.stone_count == 0

    def is_full(self):
        return self.stone_count >= self.size * self.size

    def at(self, row, col):
        """Return the Color occupying (row, col), or None when empty."""
        value = self.cells[row][col]
        return Color(value) if value != EMPTY else None

    def place(self, row, col, color):
        """Place a stone; raise InvalidMove if out of bounds or occupied."""
        color = Color(color)
        if not self.in_bounds(row, col):
            raise InvalidMove(f"move {(row, col)} out of bounds")
        if self.cells[row][col] != EMPTY:
            raise InvalidMove(f"cell {(row, col)} already occupied")
        self.cells[row][col] = color.value
        self.stone_count += 1

    def remove(self, row, col):
        """Clear a stone; raise InvalidMove if the cell is already empty."""
        if not self.in_bounds(row, col):
            raise InvalidMove(f"cell {(row, col)} out of bounds")
        if self.cells[row][col] == EMPTY:
            raise InvalidMove(f"cell {(row, col)} already empty")
        self.cells[row][col] = EMPTY
        self.stone_count -= 1

    def has_neighbor(self, row, col, radius):
        """True if any stone lies within Chebyshev distance `radius` of (row, col)."""
        for r in range(max(0, row - radius), min(self.size, row + radius + 1)):
            for c in range(max(0, col - radius), min(self.size, col + radius + 1)):
                if self.cells[r][c] != EMPTY:
                    return True
        return False

    def count_neighbors(self, row, col):
        """Count stones in the 8-neighborhood of (row, col)."""
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if self.in_bounds(r, c) and self.cells[r][c] != EMPTY:
                    count += 1
        return count

    def empty_cells(self):
        """Yield empty cells in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] == EMPTY:
                    yield r, c

    def snapshot(self):
        """Return a copy of the grid as nested lists of -1/0/1."""
        return [row[:] for row in self.cells]

    def count_dir(self, row, col, dr, dc, color):
        """Count contiguous stones of color from (row, col) (exclusive) along (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            count += 1
            r += dr
            c += dc
        return count
