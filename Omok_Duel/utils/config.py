"""Settings loading from YAML with built-in defaults."""

from pathlib import Path

import yaml

PROJECT_DIR = Path(__file__).resolve().parents[1]

DEFAULT_SETTINGS = {
    "mode": "pvp",
    "ai_delay_seconds": 0.8,
    "easy_random_chance": 0.3,
    "hard_search_radius": 2,
    "offense_weight": 1.1,
    "seed": None,
}


def resolve_project_path(path):
    """Resolve a package-relative path when invoked from outside `Omok_Duel/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings from YAML over the defaults; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})
    return settings
