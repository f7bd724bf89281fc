"""Computer opponent: heuristic evaluation, candidate generation, and move policies."""
