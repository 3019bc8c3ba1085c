"""
Geometry primitives: immutable points and width/height pairs.
"""

from typing import Iterable, NamedTuple, Optional


class Point(NamedTuple):
    """A 2-D coordinate in caller space."""
    x: float = 0.0
    y: float = 0.0

    def offset(self, delta: 'Point') -> 'Point':
        """Return this point shifted by ``delta``."""
        return Point(self.x + delta.x, self.y + delta.y)


class Dimensions(NamedTuple):
    """A width/height pair."""
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def square(cls, size: float) -> 'Dimensions':
        """Create dimensions with equal width and height."""
        return cls(size, size)


def min_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Component-wise minimum of a point collection.

    Args:
        points: Points to scan

    Returns:
        Point holding the smallest x and smallest y, or None when empty
    """
    points = list(points)
    if not points:
        return None
    return Point(min(p.x for p in points), min(p.y for p in points))


def max_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Component-wise maximum of a point collection.

    Args:
        points: Points to scan

    Returns:
        Point holding the largest x and largest y, or None when empty
    """
    points = list(points)
    if not points:
        return None
    return Point(max(p.x for p in points), max(p.y for p in points))
