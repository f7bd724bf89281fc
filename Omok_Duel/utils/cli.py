"""CLI options for selecting the game mode, AI pacing, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok Duel (five in a row, 15x15)")
    parser.add_argument(
        "--mode",
        choices=["pvp", "ai-easy", "ai-hard"],
        default=None,
        help="Play mode (White is human in pvp, computer otherwise)",
    )
    parser.add_argument("--delay", type=float, help="Seconds the AI 'thinks' before moving")
    parser.add_argument("--seed", type=int, help="Random seed for the easy AI")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)
