from __future__ import annotations
import logging
from typing import Iterator, List, Tuple

from ...core.random import RandomLike
from ..cells import Position
from ..grid import Grid, check_dimensions
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class BacktrackerGenerator(MazeGenerator):
    """Randomized depth-first carving (recursive backtracker).

    Algorithm:
    - Start fully walled with (0, 0) on an explicit stack.
    - Look at the top of the stack; if it has unvisited neighbours, carve into
      one picked uniformly at random and push it.
    - Otherwise pop and backtrack.

    The result is a perfect maze with long, winding corridors and few branches.
    """

    name = "backtracker"

    def generate(self, width: int, height: int, rng: RandomLike) -> Grid:
        check_dimensions(width, height)
        grid = Grid.create(width, height, start_closed=True)
        carved = sum(1 for _ in self.carve(grid, rng))
        logger.debug("BacktrackerGenerator: %dx%d maze, %d passages", width, height, carved)
        return grid.freeze()

    @staticmethod
    def carve(grid: Grid, rng: RandomLike) -> Iterator[Tuple[Position, Position]]:
        """Carve ``grid`` in place, yielding each (from, to) passage as it opens."""
        visited = [[False] * grid.width for _ in range(grid.height)]
        start = Position(0, 0)
        visited[start.y][start.x] = True
        stack: List[Position] = [start]

        while stack:
            current = stack[-1]
            candidates = [n for n in grid.neighbors(current) if not visited[n.y][n.x]]
            if candidates:
                nxt = rng.choice(candidates)
                grid.carve_between(current, nxt)
                visited[nxt.y][nxt.x] = True
                stack.append(nxt)
                yield current, nxt
            else:
                stack.pop()
