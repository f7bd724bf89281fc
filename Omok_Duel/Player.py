"""Player interface for human input and the computer opponent."""

import random

from .Board import Color
from .Ledger import COLS
from .ai import search_easy, search_greedy


class Player:
    def __init__(self, color):
        self.color = Color(color)

    def next_move(self, board):
        """Return (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Parses typed coordinates; the controller receives them via attempt_move."""

    def __init__(self, color=Color.BLACK, size=len(COLS)):
        super().__init__(color)
        self.size = size

    def parse(self, raw):
        """
        Accept board notation ('H8') or zero-indexed 'row col'.
        Raises ValueError on anything else.
        """
        text = raw.strip().upper()
        parts = text.replace(",", " ").split()
        if len(parts) == 2:
            try:
                return int(parts[0]), int(parts[1])
            except ValueError as exc:
                raise ValueError("Invalid input format; expected two integers") from exc
        if len(parts) == 1 and len(text) >= 2 and text[0] in COLS:
            try:
                rank = int(text[1:])
            except ValueError as exc:
                raise ValueError(f"Invalid coordinate {raw!r}") from exc
            return self.size - rank, COLS.index(text[0])
        raise ValueError(f"Invalid coordinate {raw!r}")


class AIPlayer(Player):
    def __init__(
        self,
        color=Color.WHITE,
        level="hard",
        rng=None,
        random_chance=search_easy.RANDOM_CHANCE,
        radius=2,
        offense_weight=1.1,
    ):
        super().__init__(color)
        if level not in ("easy", "hard"):
            raise ValueError(f"Unsupported AI level: {level}")
        self.level = level
        self.rng = rng or random.Random()
        self.random_chance = random_chance
        self.radius = radius
        self.offense_weight = offense_weight
        self.stats = []

    def next_move(self, board):
        if self.level == "easy":
            return search_easy.choose_move(board, rng=self.rng, random_chance=self.random_chance)
        return search_greedy.choose_move(
            board,
            self.color,
            radius=self.radius,
            offense_weight=self.offense_weight,
            stats=self.stats,
        )
