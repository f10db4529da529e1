from __future__ import annotations

from collections import deque
from typing import List, Optional, Set, Tuple

from .cells import CARDINALS
from .grid import Grid

Coord = Tuple[int, int]


def _open_neighbors(grid: Grid, x: int, y: int):
    cell = grid.cell(x, y)
    for direction in CARDINALS:
        if cell.has_wall(direction):
            continue
        dx, dy = direction.delta
        nx, ny = x + dx, y + dy
        if grid.is_within(nx, ny):
            yield nx, ny


def reachable_from(grid: Grid, start: Coord = (0, 0)) -> Set[Coord]:
    """Flood fill through open walls; returns every cell reachable from ``start``."""
    start = tuple(grid.require(start))
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nxt in _open_neighbors(grid, x, y):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def is_connected(grid: Grid) -> bool:
    return len(reachable_from(grid)) == grid.width * grid.height


def open_passage_count(grid: Grid) -> int:
    """Number of open internal wall pairs (each shared wall counted once)."""
    count = 0
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.cell(x, y)
            if x + 1 < grid.width and not cell.right:
                count += 1
            if y + 1 < grid.height and not cell.bottom:
                count += 1
    return count


def is_perfect(grid: Grid) -> bool:
    """True when the open-wall graph is a spanning tree over all cells."""
    return is_connected(grid) and open_passage_count(grid) == grid.width * grid.height - 1


def wall_symmetry_violations(grid: Grid) -> List[Tuple[Coord, Coord]]:
    """Adjacent pairs whose shared wall is reported differently by each side."""
    bad: List[Tuple[Coord, Coord]] = []
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.cell(x, y)
            if x + 1 < grid.width and cell.right != grid.cell(x + 1, y).left:
                bad.append(((x, y), (x + 1, y)))
            if y + 1 < grid.height and cell.bottom != grid.cell(x, y + 1).top:
                bad.append(((x, y), (x, y + 1)))
    return bad


def boundary_closed(grid: Grid) -> bool:
    w, h = grid.width, grid.height
    for x in range(w):
        if not grid.cell(x, 0).top or not grid.cell(x, h - 1).bottom:
            return False
    for y in range(h):
        if not grid.cell(0, y).left or not grid.cell(w - 1, y).right:
            return False
    return True


def shortest_path_length(grid: Grid, start: Coord, goal: Coord) -> Optional[int]:
    """Breadth-first search shortest path length through open walls; returns number of steps or None."""
    start = tuple(grid.require(start))
    goal = tuple(grid.require(goal))
    q = deque([(start, 0)])
    seen = {start}
    while q:
        (x, y), d = q.popleft()
        if (x, y) == goal:
            return d
        for nxt in _open_neighbors(grid, x, y):
            if nxt not in seen:
                seen.add(nxt)
                q.append((nxt, d + 1))
    return None


def dead_end_count(grid: Grid) -> int:
    """Cells with exactly one opening."""
    return sum(1 for cell in grid.cells() if cell.openings() == 1)

