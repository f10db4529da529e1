from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple


class Position(NamedTuple):
    """Grid coordinate. (0, 0) is the top-left cell; y grows downward."""

    x: int
    y: int

    def step(self, direction: "Direction") -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def wall(self) -> str:
        """Name of the wall flag this direction faces."""
        return _WALLS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def between(cls, a: Tuple[int, int], b: Tuple[int, int]) -> "Direction | None":
        """Direction leading from ``a`` to an orthogonally adjacent ``b``, else None."""
        return _BY_DELTA.get((b[0] - a[0], b[1] - a[1]))


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}
_WALLS = {
    Direction.UP: "top",
    Direction.RIGHT: "right",
    Direction.DOWN: "bottom",
    Direction.LEFT: "left",
}
_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
_BY_DELTA = {delta: d for d, delta in _DELTAS.items()}

# Neighbour scan order shared by every generator.
CARDINALS: Tuple[Direction, ...] = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


__all__ = ["CARDINALS", "Direction", "Position"]
