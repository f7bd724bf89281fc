"""Game controller: turn sequencing, terminal detection, undo, and mode switching."""

from __future__ import annotations

import logging
import random
import threading
import time
from enum import Enum
from typing import Callable, Optional

from .Board import SIZE, Board, Color
from .Ledger import Move, MoveLedger
from .Player import AIPlayer
from .engine import referee, rules
from .engine.errors import InvalidModeTransition, InvalidMove
from .utils import timer
from .utils.logger import log_event

LOGGER = logging.getLogger(__name__)

EVENTS = (
    "stone_placed",
    "game_ended",
    "move_undone",
    "ai_thinking_started",
    "ai_thinking_ended",
    "game_reset",
)


class GameMode(str, Enum):
    PVP = "pvp"
    AI_EASY = "ai-easy"
    AI_HARD = "ai-hard"

    @classmethod
    def parse(cls, value) -> "GameMode":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidModeTransition(f"Unsupported mode: {value!r}") from exc

    @property
    def is_ai(self) -> bool:
        return self is not GameMode.PVP

    @property
    def ai_level(self) -> Optional[str]:
        return {GameMode.AI_EASY: "easy", GameMode.AI_HARD: "hard"}.get(self)


class GameSession:
    """Everything that belongs to one game; replaced wholesale on reset."""

    def __init__(self, mode: GameMode, size: int = SIZE):
        self.mode = mode
        self.board = Board(size)
        self.ledger = MoveLedger(self.board)
        self.current = Color.BLACK
        self.terminal = False
        self.winner: Optional[Color] = None
        self.winning_line: list[tuple[int, int]] = []
        self.started_at = time.time()
        self.ended_at: Optional[float] = None

    def end(self, winner: Optional[Color], line: list[tuple[int, int]]):
        self.terminal = True
        self.winner = winner
        self.winning_line = line
        self.ended_at = time.time()


class Omokgame:
    """
    Entry point for a UI collaborator. Commands never raise on bad input:
    they return False and leave the session unchanged. Computer turns are
    handed to `scheduler` and dropped if a reset happened in between.
    """

    def __init__(
        self,
        mode=GameMode.PVP,
        scheduler=None,
        ai_delay: float = 0.8,
        logger: Callable[[str], None] = log_event,
        rng: Optional[random.Random] = None,
        random_chance: float = 0.3,
        radius: int = 2,
        offense_weight: float = 1.1,
    ):
        self.scheduler = scheduler or timer.ThreadScheduler()
        self.ai_delay = ai_delay
        self.logger = logger
        self.rng = rng or random.Random()
        self.random_chance = random_chance
        self.radius = radius
        self.offense_weight = offense_weight

        self._lock = threading.RLock()
        self._listeners: dict[str, list[Callable]] = {name: [] for name in EVENTS}
        self._epoch = 0
        self._ai_pending = False
        self._pending_handle = None

        mode = GameMode.parse(mode)
        self.session = GameSession(mode)
        self.ai_player = self._make_ai(mode)

    # ------------------------------------------------------------------ events
    def subscribe(self, event: str, callback: Callable):
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event}")
        self._listeners[event].append(callback)

    def unsubscribe(self, event: str, callback: Callable):
        if callback in self._listeners.get(event, []):
            self._listeners[event].remove(callback)

    def _emit(self, event: str, *args):
        for callback in list(self._listeners[event]):
            callback(*args)

    # ---------------------------------------------------------------- commands
    def attempt_move(self, row: int, col: int) -> bool:
        """Place a stone for the human to move. Returns False if rejected."""
        with self._lock:
            session = self.session
            if session.terminal:
                LOGGER.debug("move %s rejected: game over", (row, col))
                return False
            if self._ai_pending:
                LOGGER.debug("move %s rejected: computer is thinking", (row, col))
                return False
            human = Color.BLACK if session.mode.is_ai else session.current
            try:
                referee.check_move((row, col), session.board, human, session.current)
            except InvalidMove as exc:
                LOGGER.debug("move %s rejected: %s", (row, col), exc)
                return False
            self._apply_move(row, col, session.current)
            return True

    def undo(self) -> bool:
        """Take back one move (PvP) or the last computer/human pair (AI modes)."""
        with self._lock:
            session = self.session
            if not len(session.ledger) or session.terminal or self._ai_pending:
                return False
            count = 2 if session.mode.is_ai else 1
            undone = session.ledger.undo_last(count)
            last = session.ledger.last_player()
            session.current = last.opponent if last is not None else Color.BLACK
            self.logger(f"Undo: {', '.join(m.notation(session.board.size) for m in undone)}")
            try:
                self._emit("move_undone", [m.cell for m in undone])
            finally:
                self._schedule_ai_if_needed()
            return True

    def reset(self, mode=None) -> bool:
        """Start a fresh session, optionally in a new mode. Unknown modes are rejected."""
        with self._lock:
            try:
                mode = self.session.mode if mode is None else GameMode.parse(mode)
            except InvalidModeTransition as exc:
                LOGGER.debug("reset rejected: %s", exc)
                return False

            self._epoch += 1
            was_pending = self._ai_pending
            if self._pending_handle is not None:
                self._pending_handle.cancel()
            self._pending_handle = None
            self._ai_pending = False

            self.session = GameSession(mode, self.session.board.size)
            self.ai_player = self._make_ai(mode)
            if was_pending:
                self._emit("ai_thinking_ended")
            self.logger(f"New game: {mode.value}")
            self._emit("game_reset", mode)
            return True

    def set_mode(self, mode) -> bool:
        return self.reset(mode)

    # ----------------------------------------------------------------- queries
    def current_player(self) -> Color:
        return self.session.current

    def mode(self) -> GameMode:
        return self.session.mode

    def is_terminal(self) -> bool:
        return self.session.terminal

    def winner(self) -> Optional[Color]:
        return self.session.winner

    def winning_line(self) -> list[tuple[int, int]]:
        return list(self.session.winning_line)

    def move_list(self) -> list[Move]:
        return self.session.ledger.moves()

    def last_move(self) -> Optional[Move]:
        return self.session.ledger.last()

    def move_counts(self) -> dict[Color, int]:
        return self.session.ledger.counts()

    def move_notations(self) -> list[str]:
        return self.session.ledger.notations()

    def board_snapshot(self) -> list[list[int]]:
        return self.session.board.snapshot()

    def elapsed_seconds(self) -> float:
        return timer.elapsed_since(self.session.started_at, self.session.ended_at)

    def is_ai_thinking(self) -> bool:
        return self._ai_pending

    def can_undo(self) -> bool:
        session = self.session
        return bool(len(session.ledger)) and not session.terminal and not self._ai_pending

    # ---------------------------------------------------------------- internal
    def _make_ai(self, mode: GameMode) -> Optional[AIPlayer]:
        if not mode.is_ai:
            return None
        return AIPlayer(
            Color.WHITE,
            level=mode.ai_level,
            rng=self.rng,
            random_chance=self.random_chance,
            radius=self.radius,
            offense_weight=self.offense_weight,
        )

    def _is_ai(self, color: Color) -> bool:
        return self.ai_player is not None and self.ai_player.color == color

    def _apply_move(self, row: int, col: int, color: Color):
        session = self.session
        move = session.ledger.record(row, col, color)
        self.logger(f"Move {move.index}: {color.short} {move.notation(session.board.size)}")

        # Session is fully updated before any listener runs.
        line = rules.winning_line(session.board, row, col)
        if line:
            session.end(color, line)
            self.logger(f"Winner: {color.label}")
        elif rules.is_draw(session.board):
            session.end(None, [])
            self.logger("Result: Draw (board full)")
        else:
            session.current = color.opponent

        try:
            self._emit("stone_placed", move.cell, color)
            if session.terminal:
                self._emit("game_ended", session.winner, list(session.winning_line))
        finally:
            self._schedule_ai_if_needed()

    def _schedule_ai_if_needed(self):
        session = self.session
        if session.terminal or self._ai_pending or not self._is_ai(session.current):
            return
        token = self._epoch
        self._ai_pending = True
        self._emit("ai_thinking_started")
        handle = self.scheduler.schedule(self.ai_delay, lambda: self._run_ai_turn(token))
        # Inline schedulers may already have run the turn.
        if self._ai_pending and token == self._epoch:
            self._pending_handle = handle

    def _run_ai_turn(self, token: int):
        with self._lock:
            if token != self._epoch:
                LOGGER.debug("discarding stale computer turn (epoch %d != %d)", token, self._epoch)
                return
            self._ai_pending = False
            self._pending_handle = None
            session = self.session
            if session.terminal:
                return
            move = self.ai_player.next_move(session.board)
            self._emit("ai_thinking_ended")
            if move is None:
                LOGGER.warning("computer found no empty cell")
                return
            self._apply_move(move[0], move[1], self.ai_player.color)
