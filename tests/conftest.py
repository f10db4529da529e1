import sys
from pathlib import Path

import pytest

# Put 'src' on sys.path so fogmaze imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from fogmaze.core.random import RandomSource  # noqa: E402
from fogmaze.maze.grid import Grid  # noqa: E402


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def corridor():
    """3x1 grid where only (0,0)-(1,0) is open."""
    grid = Grid.create(3, 1, start_closed=True)
    grid.carve_between((0, 0), (1, 0))
    return grid.freeze()
