from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, List, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomLike(Protocol):
    """The slice of ``random.Random`` the maze generators rely on.

    Anything providing these methods can drive generation, which keeps the
    generators free of module-level random state.
    """

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...
    def choice(self, seq: Sequence[T]) -> T: ...


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests
    - reject empty selections loudly
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def random(self) -> float:
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"RandomSource.randrange() needs a positive bound, got {stop}")
        return self._rng.randrange(stop)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("RandomSource.choice() received an empty sequence")
        return seq[self._rng.randrange(0, len(seq))]

    def shuffle(self, seq: List[Any]) -> None:
        self._rng.shuffle(seq)


__all__ = ["RandomLike", "RandomSource"]
