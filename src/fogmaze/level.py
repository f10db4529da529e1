from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Optional, Set, Union

from .config.loader import DifficultyTier, default_difficulty_tiers
from .config.settings import MAX_VIEW_RADIUS, MIN_VIEW_RADIUS, MazeSettings
from .core.random import RandomLike
from .fov.visibility import visible_set
from .maze.cells import Direction, Position
from .maze.factory import MazeFactory
from .maze.grid import Grid
from .navigation.engine import MoveResult, NavigationState, attempt_move

logger = logging.getLogger(__name__)


class Level:
    """One playable maze: grid, player, goal and fog settings.

    The player starts in the top-left cell and must reach the bottom-right
    one. Once the goal is reached the level is FINISHED and ignores further
    moves; a new level (``next_level``, ``reset`` or ``restart``) replaces it wholesale.
    """

    def __init__(
        self,
        number: int,
        grid: Grid,
        settings: MazeSettings,
        rng: RandomLike,
        factory: MazeFactory,
        tiers: Dict[str, DifficultyTier],
    ) -> None:
        self.number = number
        self.grid = grid
        self.settings = settings
        self.player_pos = Position(0, 0)
        self.goal_pos = Position(grid.width - 1, grid.height - 1)
        self.state = NavigationState.PLAYING
        self.move_count = 0
        self._rng = rng
        self._factory = factory
        self._tiers = tiers

    @classmethod
    def start(
        cls,
        number: int = 1,
        settings: Optional[MazeSettings] = None,
        rng: Optional[RandomLike] = None,
        factory: Optional[MazeFactory] = None,
        tiers: Optional[Dict[str, DifficultyTier]] = None,
    ) -> "Level":
        tiers = tiers or default_difficulty_tiers()
        # Normalized copy; the caller's settings object is left alone
        settings = dataclasses.replace(settings) if settings is not None else MazeSettings()
        settings.validate(tiers)
        rng = rng if rng is not None else settings.make_rng()
        factory = factory or MazeFactory()

        width, height = tiers[settings.difficulty].dimensions_for_level(number)
        grid = factory.generate(width, height, rng=rng, algorithm=settings.algorithm)
        logger.info("Level %d (%s): %dx%d maze", number, settings.difficulty, width, height)
        return cls(number, grid, settings, rng, factory, tiers)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def finished(self) -> bool:
        return self.state is NavigationState.FINISHED

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        if self.finished:
            logger.debug("Level %d already finished; ignoring move %s", self.number, direction)
            return MoveResult(new_pos=self.player_pos, moved=False, finished=True)

        result = attempt_move(self.grid, self.player_pos, self.goal_pos, direction)
        if result.moved:
            self.player_pos = result.new_pos
            self.move_count += 1
        if result.finished:
            self.state = NavigationState.FINISHED
            logger.info("Level %d finished in %d moves", self.number, self.move_count)
        return result

    def visible_cells(self) -> Set[Position]:
        return visible_set(
            self.player_pos,
            self.settings.view_radius,
            self.settings.fog_enabled,
            self.grid.width,
            self.grid.height,
        )

    # ------------------------ View controls ------------------------
    def widen_view(self) -> int:
        self.settings.view_radius = min(MAX_VIEW_RADIUS, self.settings.view_radius + 1)
        return self.settings.view_radius

    def narrow_view(self) -> int:
        self.settings.view_radius = max(MIN_VIEW_RADIUS, self.settings.view_radius - 1)
        return self.settings.view_radius

    def toggle_fog(self) -> bool:
        self.settings.fog_enabled = not self.settings.fog_enabled
        return self.settings.fog_enabled

    # ------------------------ Progression ------------------------
    def next_level(self) -> "Level":
        return Level.start(self.number + 1, self.settings, self._rng, self._factory, self._tiers)

    def reset(self) -> "Level":
        """Replay this level number on a freshly generated maze."""
        return Level.start(self.number, self.settings, self._rng, self._factory, self._tiers)

    def restart(self, difficulty: Optional[str] = None) -> "Level":
        """Begin again at level 1, optionally on another difficulty. View settings carry over."""
        settings = self.settings
        if difficulty is not None:
            settings = dataclasses.replace(self.settings, difficulty=difficulty)
        return Level.start(1, settings, self._rng, self._factory, self._tiers)

    def __repr__(self) -> str:
        return (
            f"Level(number={self.number}, size={self.grid.width}x{self.grid.height}, "
            f"player={tuple(self.player_pos)}, state={self.state.value})"
        )


__all__ = ["Level"]
