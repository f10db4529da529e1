from .cells import Direction, Position
from .factory import MazeFactory, generate
from .grid import Cell, Grid

__all__ = ["Cell", "Direction", "Grid", "MazeFactory", "Position", "generate"]
