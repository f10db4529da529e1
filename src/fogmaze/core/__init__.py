from .random import RandomLike, RandomSource

__all__ = ["RandomLike", "RandomSource"]
