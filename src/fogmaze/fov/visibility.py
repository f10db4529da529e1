from __future__ import annotations

import logging
import math
from typing import Set, Tuple

from ..exceptions import InvalidPositionError
from ..maze.cells import Position
from ..maze.grid import check_dimensions

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def euclidean_distance(ax: int, ay: int, bx: int, by: int) -> float:
    return math.hypot(ax - bx, ay - by)


def is_visible(x: int, y: int, player_pos: Coord, radius: float, fog_enabled: bool) -> bool:
    """Whether a single cell is perceivable. Walls never block sight."""
    if not fog_enabled:
        return True
    px, py = player_pos
    return euclidean_distance(x, y, px, py) <= radius


def visible_set(
    player_pos: Coord,
    radius: float,
    fog_enabled: bool,
    width: int,
    height: int,
) -> Set[Position]:
    """
    Compute the set of visible cells around the player.

    With fog disabled every cell of the width x height grid is visible.
    Otherwise a cell is visible iff its Euclidean distance to the player is at
    most ``radius``. Recomputed from scratch on every call.
    """
    check_dimensions(width, height)
    if not fog_enabled:
        return {Position(x, y) for y in range(height) for x in range(width)}

    if radius < 0:
        raise ValueError("radius must be >= 0")
    px, py = player_pos
    if not (0 <= px < width and 0 <= py < height):
        raise InvalidPositionError(f"player_pos out of bounds: ({px}, {py}) for grid {width}x{height}")

    visible = {
        Position(x, y)
        for y in range(height)
        for x in range(width)
        if euclidean_distance(x, y, px, py) <= radius
    }
    logger.debug("Visibility from (%d,%d) radius %s -> %d cells", px, py, radius, len(visible))
    return visible


__all__ = ["euclidean_distance", "is_visible", "visible_set"]
