from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Optional, Tuple

import yaml
from jsonschema import Draft7Validator

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

_PKG = "fogmaze.config"


@dataclass(frozen=True)
class DifficultyTier:
    """Maze dimensions for one difficulty.

    The maze starts at ``start_width x start_height`` on level 1 and gains one
    cell in each dimension every ``growth_rate`` levels, capped at the max size.
    """

    name: str
    start_width: int
    start_height: int
    max_width: int
    max_height: int
    growth_rate: int

    def dimensions_for_level(self, level: int) -> Tuple[int, int]:
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        steps = (level - 1) // self.growth_rate
        return (
            min(self.start_width + steps, self.max_width),
            min(self.start_height + steps, self.max_height),
        )


@lru_cache(maxsize=1)
def _schema() -> Dict[str, Any]:
    text = resources.files(_PKG).joinpath("difficulty.schema.json").read_text(encoding="utf-8")
    return json.loads(text)


def validate_difficulty_document(raw: Any) -> None:
    """Raise ConfigError listing every schema violation in ``raw``."""
    validator = Draft7Validator(_schema())
    errors = sorted(validator.iter_errors(raw), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigError("Difficulty configuration failed validation", errors)
    for name, tier in raw["tiers"].items():
        if tier["max_width"] < tier["start_width"] or tier["max_height"] < tier["start_height"]:
            raise ConfigError(f"Difficulty '{name}': max size must not be smaller than start size")


def load_difficulty_tiers(path: Optional[str] = None) -> Dict[str, DifficultyTier]:
    """Load difficulty tiers from YAML.

    If path is None, loads the embedded default resource at
    fogmaze/config/difficulty.yaml.
    """
    if path is None:
        data = resources.files(_PKG).joinpath("difficulty.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded difficulty resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded difficulty config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Difficulty configuration is not valid YAML: {exc}") from exc
    validate_difficulty_document(raw)

    tiers = {name: DifficultyTier(name=name, **values) for name, values in raw["tiers"].items()}
    logger.info("Difficulty tiers: %s", sorted(tiers))
    return tiers


@lru_cache(maxsize=1)
def _packaged_tiers() -> Dict[str, DifficultyTier]:
    return load_difficulty_tiers()


def default_difficulty_tiers() -> Dict[str, DifficultyTier]:
    """The packaged tiers, read and validated once per process."""
    return dict(_packaged_tiers())


__all__ = ["DifficultyTier", "default_difficulty_tiers", "load_difficulty_tiers", "validate_difficulty_document"]
