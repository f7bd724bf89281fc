"""Rule engine: error kinds, win detection, and move validation."""
