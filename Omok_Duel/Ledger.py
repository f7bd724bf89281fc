"""Ordered move record with undo that keeps the board in step."""

from __future__ import annotations

from dataclasses import dataclass

from .Board import Color

COLS = "ABCDEFGHIJKLMNO"


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    color: Color
    index: int

    @property
    def cell(self) -> tuple[int, int]:
        return self.row, self.col

    def notation(self, size: int = len(COLS)) -> str:
        """Board coordinate as shown to players, e.g. (7, 7) -> 'H8'."""
        return f"{COLS[self.col]}{size - self.row}"


class MoveLedger:
    """
    Play-order record of moves bound to one board.
    Every entry corresponds to exactly one occupied cell on that board.
    """

    def __init__(self, board):
        self.board = board
        self._moves: list[Move] = []

    def __len__(self):
        return len(self._moves)

    def record(self, row: int, col: int, color: Color) -> Move:
        """Place the stone and append the move; nothing is recorded if placement fails."""
        color = Color(color)
        self.board.place(row, col, color)
        move = Move(row, col, color, len(self._moves) + 1)
        self._moves.append(move)
        return move

    def undo_last(self, count: int = 1) -> list[Move]:
        """Pop up to `count` moves, newest first, clearing each stone from the board."""
        undone = []
        while self._moves and len(undone) < count:
            move = self._moves[-1]
            self.board.remove(move.row, move.col)
            self._moves.pop()
            undone.append(move)
        return undone

    def last(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def last_player(self) -> Color | None:
        move = self.last()
        return move.color if move else None

    def moves(self) -> list[Move]:
        return list(self._moves)

    def counts(self) -> dict[Color, int]:
        counts = {Color.BLACK: 0, Color.WHITE: 0}
        for move in self._moves:
            counts[move.color] += 1
        return counts

    def notations(self) -> list[str]:
        return [move.notation(self.board.size) for move in self._moves]
