"""Convex hull by gift wrapping (Jarvis march), with a step-by-step animator."""

from .jarvis_march import Point, orientation, leftmost_index, gift_wrapping
from .hull_checks import hull_contains, same_cycle

__all__ = [
    'Point',
    'orientation',
    'leftmost_index',
    'gift_wrapping',
    'hull_contains',
    'same_cycle',
]
