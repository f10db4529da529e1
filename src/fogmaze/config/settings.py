from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..core.random import RandomSource
from ..exceptions import ConfigError
from .loader import DifficultyTier, default_difficulty_tiers

logger = logging.getLogger(__name__)

INITIAL_VIEW_RADIUS = 3
MIN_VIEW_RADIUS = 1
MAX_VIEW_RADIUS = 10
DEFAULT_DIFFICULTY = "normal"


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool.

    Accepts: True/False, 1/0, "true"/"false", "yes"/"no", "on"/"off" (case-insensitive),
    non-empty strings evaluate to True if not matched otherwise.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
        return True
    return bool(value)


def clamp_view_radius(radius: int) -> int:
    return max(MIN_VIEW_RADIUS, min(MAX_VIEW_RADIUS, int(radius)))


@dataclass
class MazeSettings:
    """Session settings for maze generation and the fog of war.

    Settings can be constructed/overridden from:
    - A YAML file (env FOGMAZE_SETTINGS_FILE or an explicit path)
    - Environment variables (prefix: FOGMAZE_)

    Precedence, lowest to highest: defaults < file < env.
    """

    difficulty: str = DEFAULT_DIFFICULTY
    view_radius: int = INITIAL_VIEW_RADIUS
    fog_enabled: bool = True
    # None or "random" picks a generator per level
    algorithm: Optional[str] = None
    seed: Optional[int] = None

    def validate(self, tiers: Optional[Mapping[str, DifficultyTier]] = None) -> None:
        """Validate and normalize settings to safe values.

        ``difficulty`` is checked against ``tiers`` (the packaged ones by
        default). An unknown name falls back to ``normal`` when that tier
        exists, otherwise to the first tier listed.
        """
        tiers = default_difficulty_tiers() if tiers is None else tiers
        if not tiers:
            raise ConfigError("No difficulty tiers to validate against")
        self.difficulty = str(self.difficulty).strip().lower()
        if self.difficulty not in tiers:
            fallback = DEFAULT_DIFFICULTY if DEFAULT_DIFFICULTY in tiers else next(iter(tiers))
            logger.warning("Unknown difficulty %r; resetting to %s", self.difficulty, fallback)
            self.difficulty = fallback
        radius = clamp_view_radius(self.view_radius)
        if radius != self.view_radius:
            logger.warning(
                "view_radius %s outside [%d, %d]; clamped to %d",
                self.view_radius, MIN_VIEW_RADIUS, MAX_VIEW_RADIUS, radius,
            )
        self.view_radius = radius
        self.fog_enabled = _as_bool(self.fog_enabled)
        if self.algorithm is not None:
            self.algorithm = str(self.algorithm).strip().lower() or None
        if self.seed is not None:
            self.seed = int(self.seed)

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def make_rng(self) -> RandomSource:
        return RandomSource(self.seed)

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MazeSettings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in allowed}
        obj = cls(**filtered)
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            "FOGMAZE_DIFFICULTY": ("difficulty", str),
            "FOGMAZE_VIEW_RADIUS": ("view_radius", int),
            "FOGMAZE_FOG": ("fog_enabled", _as_bool),
            "FOGMAZE_ALGORITHM": ("algorithm", str),
            "FOGMAZE_SEED": ("seed", int),
        }
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    logger.error("Invalid env for %s=%r: %s", env_key, env[env_key], exc)
        return out

    @classmethod
    def from_yaml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        try:
            with path.open("r", encoding="utf-8") as f:
                doc = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error("Failed to read settings YAML %s: %s", path, exc)
            return {}
        if not isinstance(doc, dict):
            logger.warning("Settings file %s does not hold a mapping; ignoring", path)
            return {}
        # Allow keys at top level or under a [maze] section
        flat: Dict[str, Any] = {}
        if isinstance(doc.get("maze"), dict):
            flat.update(doc["maze"])
        for k, v in doc.items():
            if not isinstance(v, dict):
                flat[k] = v
        return flat

    @classmethod
    def discover_config_path(cls, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        env = os.environ if env is None else env
        env_path = env.get("FOGMAZE_SETTINGS_FILE")
        if env_path:
            return Path(env_path).expanduser().resolve()
        return None

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "MazeSettings":
        data: Dict[str, Any] = {}
        if file_path is not None:
            chosen_path: Optional[Path] = Path(file_path).expanduser().resolve()
        else:
            chosen_path = cls.discover_config_path(env)
        if chosen_path is not None:
            data.update(cls.from_yaml_file(chosen_path))
        data.update(cls.from_env(env))
        return cls.from_dict(data)


__all__ = [
    "DEFAULT_DIFFICULTY",
    "INITIAL_VIEW_RADIUS",
    "MAX_VIEW_RADIUS",
    "MIN_VIEW_RADIUS",
    "MazeSettings",
    "clamp_view_radius",
]
