from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence, Type

from ..core.random import RandomLike, RandomSource
from .generator import BacktrackerGenerator, DivisionGenerator, MazeGenerator, PrimsGenerator
from .grid import Grid, check_dimensions

logger = logging.getLogger(__name__)

STRATEGIES: Sequence[Type[MazeGenerator]] = (BacktrackerGenerator, PrimsGenerator, DivisionGenerator)

ALIASES: Dict[str, str] = {
    "backtracker": BacktrackerGenerator.name,
    "dfs": BacktrackerGenerator.name,
    "recursive_backtracker": BacktrackerGenerator.name,
    "prims": PrimsGenerator.name,
    "prim": PrimsGenerator.name,
    "division": DivisionGenerator.name,
    "recursive_division": DivisionGenerator.name,
}


class MazeFactory:
    """Picks one of the maze generators and runs it.

    Usage:
      grid = MazeFactory().generate(24, 24, rng=RandomSource(7))
      grid = MazeFactory().generate(24, 24, algorithm="prims")

    Without an explicit algorithm each strategy is chosen with equal
    probability on every call.
    """

    def __init__(self, strategies: Optional[Sequence[Type[MazeGenerator]]] = None) -> None:
        self._generators: Dict[str, MazeGenerator] = {}
        for cls in strategies or STRATEGIES:
            gen = cls()
            self._generators[gen.name] = gen

    def available(self) -> List[str]:
        return list(self._generators)

    def build_generator(self, algorithm: Optional[str]) -> Optional[MazeGenerator]:
        """Resolve an algorithm name or alias.

        Returns None for "random"/empty names and, with a warning, for unknown
        ones; the caller then chooses at random.
        """
        algo = (algorithm or "random").strip().lower()
        if algo == "random":
            return None
        name = ALIASES.get(algo, algo)
        gen = self._generators.get(name)
        if gen is None:
            logger.warning("Unknown maze algorithm '%s', choosing one at random", algorithm)
        return gen

    def choose(self, rng: RandomLike) -> MazeGenerator:
        gens = list(self._generators.values())
        return rng.choice(gens)

    def generate(
        self,
        width: int,
        height: int,
        rng: Optional[RandomLike] = None,
        algorithm: Optional[str] = None,
    ) -> Grid:
        check_dimensions(width, height)
        rng = rng if rng is not None else RandomSource()
        gen = self.build_generator(algorithm) or self.choose(rng)
        logger.info("MazeFactory: using %s for %dx%d", type(gen).__name__, width, height)
        return gen.generate(width, height, rng)


_DEFAULT_FACTORY = MazeFactory()


def generate(width: int, height: int, rng: Optional[RandomLike] = None) -> Grid:
    """Build a maze with a strategy picked uniformly at random."""
    return _DEFAULT_FACTORY.generate(width, height, rng)


__all__ = ["ALIASES", "MazeFactory", "STRATEGIES", "generate"]
