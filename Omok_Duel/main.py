"""Terminal front end: load settings, wire the controller, and read commands."""

import random

from .Board import Color
from .Omokgame import Omokgame
from .Player import HumanPlayer
from .Ledger import COLS
from .utils.cli import parse_args
from .utils.config import load_settings
from .utils.logger import configure_logging, log_event
from .utils.timer import BlockingScheduler

HELP = "Commands: <move> (e.g. H8 or '7 7'), undo, new, mode <pvp|ai-easy|ai-hard>, quit"
GLYPHS = {0: ".", -1: "X", 1: "O"}


def render(game):
    board = game.board_snapshot()
    size = len(board)
    line = game.winning_line()
    last = game.last_move()
    rows = ["   " + " ".join(COLS[:size])]
    for r in range(size):
        cells = []
        for c in range(size):
            glyph = GLYPHS[board[r][c]]
            if (r, c) in line:
                glyph = "*"
            elif last and (r, c) == last.cell:
                glyph = glyph.lower()
            cells.append(glyph)
        rows.append(f"{size - r:>2} " + " ".join(cells))
    return "\n".join(rows)


def status(game):
    if game.is_terminal():
        winner = game.winner()
        return "Draw." if winner is None else f"{winner.label} wins in {len(game.move_list())} moves."
    return f"{game.current_player().label} to move ({game.mode().value}, {game.elapsed_seconds():.0f}s)"


def build_game(args, settings):
    seed = args.seed if args.seed is not None else settings.get("seed")
    delay = args.delay if args.delay is not None else settings.get("ai_delay_seconds", 0.8)
    game = Omokgame(
        mode=args.mode or settings.get("mode", "pvp"),
        scheduler=BlockingScheduler(),
        ai_delay=delay,
        logger=log_event,
        rng=random.Random(seed),
        random_chance=settings.get("easy_random_chance", 0.3),
        radius=settings.get("hard_search_radius", 2),
        offense_weight=settings.get("offense_weight", 1.1),
    )
    game.subscribe("ai_thinking_started", lambda: print("Computer is thinking..."))
    return game


def handle(game, human, command):
    """Apply one typed command; returns False when the user quits."""
    words = command.split()
    if not words:
        return True
    verb = words[0].lower()
    if verb in ("quit", "exit", "q"):
        return False
    if verb == "undo":
        if not game.undo():
            print("Nothing to undo.")
    elif verb == "new":
        game.reset()
    elif verb == "mode":
        if len(words) != 2 or not game.set_mode(words[1].lower()):
            print("Usage: mode <pvp|ai-easy|ai-hard>")
    elif verb in ("help", "?"):
        print(HELP)
    else:
        try:
            row, col = human.parse(command)
        except ValueError as exc:
            print(exc)
            return True
        if not game.attempt_move(row, col):
            print("Move rejected.")
    return True


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)
    game = build_game(args, settings)
    human = HumanPlayer(Color.BLACK)

    print(HELP)
    while True:
        print(render(game))
        print(status(game))
        try:
            command = input("> ")
        except EOFError:
            break
        if not handle(game, human, command):
            break


if __name__ == "__main__":
    main()
