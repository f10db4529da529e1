from __future__ import annotations

from typing import List, Optional


class FogMazeError(Exception):
    """Base exception for the fogmaze engine."""


class InvalidDimensionsError(FogMazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class InvalidPositionError(FogMazeError, IndexError):
    """Raised when a position lies outside the grid it is used with."""


class InvalidDirectionError(FogMazeError, ValueError):
    """Raised when a move names something other than UP, DOWN, LEFT or RIGHT."""


class NotAdjacentError(FogMazeError, ValueError):
    """Raised when carving or sealing between cells that do not share a wall."""


class GridFrozenError(FogMazeError, RuntimeError):
    """Raised when a finished maze is mutated."""


class ConfigError(FogMazeError):
    """Raised when a configuration document fails validation."""

    def __init__(self, message: str, errors: Optional[List[object]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in getattr(e, "path", ())) or "<root>"
            parts.append(f" - at {path}: {getattr(e, 'message', e)}")
        return "\n".join(parts)
