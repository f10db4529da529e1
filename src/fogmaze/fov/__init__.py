from .visibility import euclidean_distance, is_visible, visible_set

__all__ = ["euclidean_distance", "is_visible", "visible_set"]
