"""Omok_Duel package exports."""

from .Board import Board, Color
from .Ledger import Move, MoveLedger
from .Omokgame import GameMode, GameSession, Omokgame
from .Player import Player, HumanPlayer, AIPlayer
from .engine.errors import InvalidMove, InvalidModeTransition

# Subpackages for rule engine, AI policies, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Color",
    "Move",
    "MoveLedger",
    "GameMode",
    "GameSession",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "InvalidMove",
    "InvalidModeTransition",
    "ai",
    "engine",
    "utils",
]
