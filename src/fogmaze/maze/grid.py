from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from ..exceptions import (
    GridFrozenError,
    InvalidDimensionsError,
    InvalidPositionError,
    NotAdjacentError,
)
from .cells import CARDINALS, Direction, Position

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def check_dimensions(width: int, height: int) -> None:
    """Reject anything that cannot be the size of a maze.

    Raises InvalidDimensionsError for non-integers and values below 1.
    """
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(f"{label} must be an int, got {value!r}")
        if value < 1:
            raise InvalidDimensionsError(f"{label} must be >= 1, got {value}")


class Cell:
    """One square of a maze with its four wall flags.

    Walls are read through ``top``/``right``/``bottom``/``left`` or
    :meth:`has_wall`; only the owning :class:`Grid` changes them.
    """

    __slots__ = ("x", "y", "_walls")

    def __init__(self, x: int, y: int, closed: bool) -> None:
        self.x = x
        self.y = y
        self._walls: Dict[str, bool] = {
            "top": closed,
            "right": closed,
            "bottom": closed,
            "left": closed,
        }

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def top(self) -> bool:
        return self._walls["top"]

    @property
    def right(self) -> bool:
        return self._walls["right"]

    @property
    def bottom(self) -> bool:
        return self._walls["bottom"]

    @property
    def left(self) -> bool:
        return self._walls["left"]

    def has_wall(self, direction: Direction) -> bool:
        return self._walls[direction.wall]

    def walls(self) -> Dict[str, bool]:
        return dict(self._walls)

    def openings(self) -> int:
        return sum(1 for closed in self._walls.values() if not closed)

    def __repr__(self) -> str:
        flags = "".join(k[0].upper() if v else "." for k, v in self._walls.items())
        return f"Cell({self.x}, {self.y}, walls={flags})"


class Grid:
    """Rectangular maze of cells joined by open or closed walls.

    Cells are stored row-major (``cells[y][x]``). Walls between two cells are
    only ever changed in pairs, so the wall each side reports always agrees.
    Once :meth:`freeze` has been called the grid rejects further mutation.
    """

    __slots__ = ("_w", "_h", "_cells", "_frozen")

    def __init__(self, width: int, height: int, start_closed: bool = True) -> None:
        check_dimensions(width, height)
        self._w = width
        self._h = height
        self._cells: List[List[Cell]] = [
            [Cell(x, y, start_closed) for x in range(width)] for y in range(height)
        ]
        self._frozen = False
        logger.debug("Initialized Grid %dx%d (closed=%s)", width, height, start_closed)

    @classmethod
    def create(cls, width: int, height: int, start_closed: bool) -> "Grid":
        return cls(width, height, start_closed)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Grid":
        self._frozen = True
        return self

    def is_within(self, x: int, y: int) -> bool:
        """Check if coordinates are within the grid bounds. Never raises."""
        return 0 <= x < self._w and 0 <= y < self._h

    def require(self, pos: Coord) -> Position:
        """Return ``pos`` as a Position, raising InvalidPositionError if outside the grid."""
        x, y = pos
        if not self.is_within(x, y):
            raise InvalidPositionError(f"Position out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return Position(x, y)

    def cell(self, x: int, y: int) -> Cell:
        if not self.is_within(x, y):
            raise InvalidPositionError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return self._cells[y][x]

    def has_wall(self, pos: Coord, direction: Direction) -> bool:
        return self.cell(*pos).has_wall(direction)

    def neighbors(self, pos: Coord) -> Iterator[Position]:
        """Yield in-bounds 4-neighbours in UP, RIGHT, DOWN, LEFT order."""
        x, y = pos
        for direction in CARDINALS:
            dx, dy = direction.delta
            nx, ny = x + dx, y + dy
            if self.is_within(nx, ny):
                yield Position(nx, ny)

    def positions(self) -> Iterator[Position]:
        for y in range(self._h):
            for x in range(self._w):
                yield Position(x, y)

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    # ------------------------ Mutation ------------------------
    def carve_between(self, a: Coord, b: Coord) -> None:
        """Open the wall pair shared by adjacent cells ``a`` and ``b``."""
        self._set_between(a, b, closed=False)

    def seal_between(self, a: Coord, b: Coord) -> None:
        """Close the wall pair shared by adjacent cells ``a`` and ``b``."""
        self._set_between(a, b, closed=True)

    def seal_boundary(self) -> None:
        """Close every wall on the outer edge of the grid."""
        self._check_mutable()
        for x in range(self._w):
            self._cells[0][x]._walls["top"] = True
            self._cells[self._h - 1][x]._walls["bottom"] = True
        for y in range(self._h):
            self._cells[y][0]._walls["left"] = True
            self._cells[y][self._w - 1]._walls["right"] = True

    def _set_between(self, a: Coord, b: Coord, closed: bool) -> None:
        self._check_mutable()
        first = self.cell(*a)
        second = self.cell(*b)
        direction = Direction.between(a, b)
        if direction is None:
            raise NotAdjacentError(f"Cells {tuple(a)} and {tuple(b)} do not share a wall")
        first._walls[direction.wall] = closed
        second._walls[direction.opposite.wall] = closed

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GridFrozenError("Grid walls are fixed once generation has finished")

    def __repr__(self) -> str:
        return f"Grid(width={self._w}, height={self._h})"


__all__ = ["Cell", "Grid", "check_dimensions"]
