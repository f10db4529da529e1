from __future__ import annotations
import logging
from typing import Iterator, List, Tuple

from ...core.random import RandomLike
from ..cells import Position
from ..grid import Grid, check_dimensions
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class PrimsGenerator(MazeGenerator):
    """Randomized Prim's algorithm.

    The maze grows outward from (0, 0). A frontier list holds unvisited cells
    next to the maze; each round removes one at a random index, attaches it to
    a random already-visited neighbour and adds its own unvisited neighbours.

    The frontier is a multiset: a cell can be queued more than once and stale
    entries are skipped when they come out. Deduplicating it would change the
    distribution of generated mazes. Compared to the backtracker this yields
    shorter dead ends and more even branching.
    """

    name = "prims"

    def generate(self, width: int, height: int, rng: RandomLike) -> Grid:
        check_dimensions(width, height)
        grid = Grid.create(width, height, start_closed=True)
        carved = sum(1 for _ in self.carve(grid, rng))
        logger.debug("PrimsGenerator: %dx%d maze, %d passages", width, height, carved)
        return grid.freeze()

    @staticmethod
    def carve(grid: Grid, rng: RandomLike) -> Iterator[Tuple[Position, Position]]:
        """Carve ``grid`` in place, yielding (new cell, in-maze neighbour) per step."""
        visited = [[False] * grid.width for _ in range(grid.height)]

        def queue_neighbors(pos: Position) -> None:
            for n in grid.neighbors(pos):
                if not visited[n.y][n.x]:
                    frontier.append(n)

        start = Position(0, 0)
        visited[start.y][start.x] = True
        frontier: List[Position] = []
        queue_neighbors(start)

        while frontier:
            current = frontier.pop(rng.randrange(len(frontier)))
            if visited[current.y][current.x]:
                continue

            in_maze = [n for n in grid.neighbors(current) if visited[n.y][n.x]]
            # Only reachable via a visited neighbour, so never empty.
            neighbor = rng.choice(in_maze)
            grid.carve_between(current, neighbor)
            visited[current.y][current.x] = True
            queue_neighbors(current)
            yield current, neighbor
