from __future__ import annotations
from abc import ABC, abstractmethod

from ...core.random import RandomLike
from ..grid import Grid


class MazeGenerator(ABC):
    """Abstract base for maze generators.

    Every implementation turns a width, height and random source into a fully
    formed, connected and frozen :class:`Grid`.
    """

    name: str = "abstract"

    @abstractmethod
    def generate(self, width: int, height: int, rng: RandomLike) -> Grid:
        """Generate a maze."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
