"""
Checks used to verify hull results.

Both helpers work on plain (x, y) pairs as well as Points.
"""

from typing import Sequence, Tuple

from .jarvis_march import orientation, COUNTER_CLOCKWISE, CLOCKWISE

Vertex = Tuple[int, int]


def hull_contains(hull: Sequence[Vertex], point: Vertex) -> bool:
    """
    Determine if a point is inside or on the boundary of a convex polygon.

    Args:
        hull: convex polygon vertices, clockwise or counter-clockwise
        point: (x, y) coordinates

    Returns:
        True if the point is inside or on an edge, False otherwise.
        A hull with fewer than 3 vertices contains nothing.

    Algorithm:
        Walk every edge and classify the turn towards the point. A point
        outside sees at least one edge turning each way.
    """
    if len(hull) < 3:
        return False

    turns = set()
    for i in range(len(hull)):
        a = hull[i]
        b = hull[(i + 1) % len(hull)]
        turns.add(orientation(a, b, point))

    return not (COUNTER_CLOCKWISE in turns and CLOCKWISE in turns)


def same_cycle(a: Sequence[Vertex], b: Sequence[Vertex]) -> bool:
    """True if `a` and `b` are the same closed vertex cycle up to rotation."""
    a = [tuple(v) for v in a]
    b = [tuple(v) for v in b]
    if len(a) != len(b):
        return False
    if not a:
        return True
    return any(a[k:] + a[:k] == b for k in range(len(a)))
