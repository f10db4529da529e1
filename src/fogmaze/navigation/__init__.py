from .engine import MoveResult, NavigationState, attempt_move, coerce_direction

__all__ = ["MoveResult", "NavigationState", "attempt_move", "coerce_direction"]
