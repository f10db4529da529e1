from .loader import DifficultyTier, default_difficulty_tiers, load_difficulty_tiers
from .settings import (
    DEFAULT_DIFFICULTY,
    INITIAL_VIEW_RADIUS,
    MAX_VIEW_RADIUS,
    MIN_VIEW_RADIUS,
    MazeSettings,
    clamp_view_radius,
)

__all__ = [
    "DEFAULT_DIFFICULTY",
    "DifficultyTier",
    "default_difficulty_tiers",
    "INITIAL_VIEW_RADIUS",
    "MAX_VIEW_RADIUS",
    "MIN_VIEW_RADIUS",
    "MazeSettings",
    "clamp_view_radius",
    "load_difficulty_tiers",
]
