from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..exceptions import InvalidDirectionError
from ..maze.cells import Direction, Position
from ..maze.grid import Grid

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class NavigationState(str, Enum):
    PLAYING = "playing"
    FINISHED = "finished"  # terminal until the level is rebuilt


@dataclass(frozen=True)
class MoveResult:
    new_pos: Position
    moved: bool
    finished: bool


def coerce_direction(direction: Union[Direction, str]) -> Direction:
    """Accept a Direction or its name ("UP", "down", ...); anything else is rejected."""
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction(direction.strip().upper())
        except ValueError:
            pass
    raise InvalidDirectionError(f"Unknown direction: {direction!r}")


def attempt_move(
    grid: Grid,
    player_pos: Coord,
    goal_pos: Coord,
    direction: Union[Direction, str],
) -> MoveResult:
    """Try to step one cell from ``player_pos`` in ``direction``.

    The wall on the player's side decides: open means the player lands on the
    adjacent cell, closed means a bump and the position is unchanged. Bumping
    is not an error. Positions outside the grid and unknown directions raise.

    Args:
        grid: Generated maze.
        player_pos: Current (x, y).
        goal_pos: Target (x, y).
        direction: Direction member or its name.

    Returns:
        MoveResult with the resulting position, whether a step happened and
        whether it reached the goal.
    """
    direction = coerce_direction(direction)
    here = grid.require(player_pos)
    goal = grid.require(goal_pos)

    if grid.has_wall(here, direction):
        logger.debug("Bump at (%d,%d) moving %s", here.x, here.y, direction.value)
        return MoveResult(new_pos=here, moved=False, finished=False)

    target = here.step(direction)
    # Carving never opens the outer edge; guard against hand-built grids anyway.
    grid.require(target)
    finished = target == goal
    logger.debug("Move %s from (%d,%d) to (%d,%d)%s", direction.value, here.x, here.y, target.x, target.y,
                 " reaching goal" if finished else "")
    return MoveResult(new_pos=target, moved=True, finished=finished)


__all__ = ["MoveResult", "NavigationState", "attempt_move", "coerce_direction"]
