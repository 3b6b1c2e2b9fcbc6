# Convex hull by gift wrapping (Jarvis march)

import collections
import logging


Point = collections.namedtuple('Point', ('x', 'y'))

COLLINEAR = 0
COUNTER_CLOCKWISE = 1
CLOCKWISE = 2


def orientation(p, q, r):
    # Returns 0 if collinear, 1 if counter-clockwise, 2 if clockwise
    x1, y1 = p
    x2, y2 = q
    x3, y3 = r
    val = (y2 - y1) * (x3 - x2) - (x2 - x1) * (y3 - y2)
    if val == 0:
        return COLLINEAR
    return COUNTER_CLOCKWISE if val > 0 else CLOCKWISE


def leftmost_index(points):
    # Smallest x, first occurrence wins on ties
    leftmost = 0
    for i in range(1, len(points)):
        if points[i][0] < points[leftmost][0]:
            leftmost = i
    return leftmost


def gift_wrapping(points):
    """Convex hull of `points` by gift wrapping (Jarvis march).

    Returns a new list of Points starting at the leftmost point. Fewer than
    three points have no hull and give an empty list. Collinear inputs and
    duplicates are not special-cased; when collinear boundary points send
    the wrap into a cycle that never reaches the start, the walk stops at
    the first revisited point.
    """
    points = [Point(*p) for p in points]
    n = len(points)
    if n < 3:
        logging.debug("gift_wrapping: %d point(s), no hull", n)
        return []

    start = leftmost_index(points)
    hull = []
    visited = set()

    p = start
    while True:
        hull.append(points[p])
        visited.add(p)
        q = (p + 1) % n
        for i in range(n):
            if orientation(points[p], points[i], points[q]) == CLOCKWISE:
                q = i
        p = q
        if p == start:  # Completed the loop
            break
        if p in visited:  # Cycle that misses the start
            logging.debug("gift_wrapping: revisited index %d, stopping", p)
            break

    logging.debug("gift_wrapping: %d points -> %d hull vertices", n, len(hull))
    return hull


if __name__ == '__main__':
    points = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]
    hull = gift_wrapping(points)
    print("Convex Hull:", hull)
