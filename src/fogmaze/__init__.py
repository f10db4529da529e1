from importlib.metadata import version, PackageNotFoundError

from .fov.visibility import visible_set
from .maze.cells import Direction, Position
from .maze.factory import generate
from .maze.grid import Cell, Grid
from .navigation.engine import MoveResult, NavigationState, attempt_move

__all__ = [
    "__version__",
    "Cell",
    "Direction",
    "Grid",
    "MoveResult",
    "NavigationState",
    "Position",
    "attempt_move",
    "generate",
    "visible_set",
]

try:
    __version__ = version("fogmaze")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
