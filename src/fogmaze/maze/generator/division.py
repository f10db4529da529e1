from __future__ import annotations
import logging

from ...core.random import RandomLike
from ..grid import Grid, check_dimensions
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class DivisionGenerator(MazeGenerator):
    """Recursive division: start open and add walls.

    The grid begins with no internal walls and a closed boundary. Each region
    is cut by one straight wall with a single gap, across its shorter side
    (a coin flip for squares), and both halves are divided again until a
    region is less than two cells wide or tall. Produces room-like partitions
    with long straight corridors.
    """

    name = "division"

    def generate(self, width: int, height: int, rng: RandomLike) -> Grid:
        check_dimensions(width, height)
        grid = Grid.create(width, height, start_closed=False)
        grid.seal_boundary()
        self.divide(grid, 0, 0, width, height, rng)
        logger.debug("DivisionGenerator: %dx%d maze", width, height)
        return grid.freeze()

    def divide(self, grid: Grid, x: int, y: int, w: int, h: int, rng: RandomLike) -> None:
        """Partition the region at (x, y) of size w x h, recursing into both halves."""
        if w < 2 or h < 2:
            return

        if w < h:
            horizontal = True
        elif w > h:
            horizontal = False
        else:
            horizontal = rng.random() < 0.5

        if horizontal:
            # wall runs left-right below row wall_y
            wall_y = y + rng.randrange(h - 1)
            hole_x = x + rng.randrange(w)
            for i in range(x, x + w):
                if i != hole_x:
                    grid.seal_between((i, wall_y), (i, wall_y + 1))
            self.divide(grid, x, y, w, wall_y - y + 1, rng)
            self.divide(grid, x, wall_y + 1, w, y + h - wall_y - 1, rng)
        else:
            # wall runs top-bottom right of column wall_x
            wall_x = x + rng.randrange(w - 1)
            hole_y = y + rng.randrange(h)
            for i in range(y, y + h):
                if i != hole_y:
                    grid.seal_between((wall_x, i), (wall_x + 1, i))
            self.divide(grid, x, y, wall_x - x + 1, h, rng)
            self.divide(grid, wall_x + 1, y, x + w - wall_x - 1, h, rng)
