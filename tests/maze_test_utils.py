from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

from fogmaze.maze.cells import CARDINALS, Direction, Position
from fogmaze.maze.grid import Grid


def wall_signature(grid: Grid) -> Tuple[Tuple[bool, ...], ...]:
    return tuple(
        (c.top, c.right, c.bottom, c.left) for c in grid.cells()
    )


def solve(grid: Grid, start: Tuple[int, int], goal: Tuple[int, int]) -> Optional[List[Direction]]:
    """Directions leading from start to goal through open walls, or None."""
    start = Position(*start)
    goal = Position(*goal)
    parents: Dict[Position, Tuple[Position, Direction]] = {}
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            break
        for d in CARDINALS:
            if grid.has_wall(cur, d):
                continue
            nxt = cur.step(d)
            if grid.is_within(*nxt) and nxt not in seen:
                seen.add(nxt)
                parents[nxt] = (cur, d)
                q.append(nxt)
    if goal not in seen:
        return None
    path: List[Direction] = []
    node = goal
    while node != start:
        node, d = parents[node]
        path.append(d)
    path.reverse()
    return path
