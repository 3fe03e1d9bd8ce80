"""Point and segment value types.

This module defines the fundamental geometric types shared by the
generator, the clipper and the writers:
- Point: A 2D point
- Segment: A line segment between two points
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Segment:
    """A line segment from ``start`` to ``end``.

    Direction is bookkeeping only: clipping treats both endpoints the same
    way and always returns a new segment.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> "Segment":
        """Build a segment from raw coordinates."""
        return cls(Point(x0, y0), Point(x1, y1))

    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def is_degenerate(self, tolerance: float = 0.0) -> bool:
        """True when the segment is no longer than ``tolerance``."""
        if tolerance == 0.0:
            return self.start == self.end
        return self.length() <= tolerance

    def reversed(self) -> "Segment":
        """Return the same segment with its endpoints swapped."""
        return Segment(self.end, self.start)

    def to_tuple(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Convert to ((x0, y0), (x1, y1))."""
        return (self.start.to_tuple(), self.end.to_tuple())

