from .base import MazeGenerator
from .backtracker import BacktrackerGenerator
from .division import DivisionGenerator
from .prims import PrimsGenerator

__all__ = ["MazeGenerator", "BacktrackerGenerator", "PrimsGenerator", "DivisionGenerator"]
