"""Game configuration: settings YAML loading and the immutable engine config."""

from dataclasses import dataclass
from pathlib import Path

import yaml

MIN_DEPTH = 1
MAX_DEPTH = 4
DEFAULT_DEPTH = 2

PROJECT_DIR = Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class EngineConfig:
    """Fixed for the lifetime of one game."""

    depth: int = DEFAULT_DEPTH
    ai_black: bool = False
    seed: int | None = None

    def __post_init__(self):
        if not isinstance(self.depth, int) or not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(f"depth must be an integer in [{MIN_DEPTH}, {MAX_DEPTH}], got {self.depth!r}")


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gobang_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_config(args=None, settings=None):
    """CLI flags win over settings, settings win over defaults."""
    settings = settings or {}
    depth = getattr(args, "depth", None) or settings.get("search_depth", DEFAULT_DEPTH)
    ai_black = getattr(args, "ai_black", None)
    if ai_black is None:
        ai_black = bool(settings.get("ai_black", False))
    seed = getattr(args, "seed", None)
    if seed is None:
        seed = settings.get("zobrist_seed")
    return EngineConfig(depth=depth, ai_black=ai_black, seed=seed)
