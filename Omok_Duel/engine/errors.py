"""Error kinds raised by the rule engine and absorbed by the game controller."""


class InvalidMove(ValueError):
    """Occupied cell, out-of-range coordinate, or a move out of turn."""


class InvalidModeTransition(ValueError):
    """Unknown game mode requested."""
