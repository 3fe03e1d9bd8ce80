"""Axis-aligned clip rectangle."""

import math
from dataclasses import dataclass

from hatcher.domain.segment import Point, Segment
from hatcher.exceptions import InvalidRectangleError


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle given by two opposite corners.

    The corners must satisfy ``bottom_left.x <= top_right.x`` and
    ``bottom_left.y <= top_right.y``. Zero width or height is allowed
    (a degenerate rectangle); an inverted rectangle is rejected.

    Attributes:
        bottom_left: Corner with minimum x and minimum y
        top_right: Corner with maximum x and maximum y

    Raises:
        InvalidRectangleError: If the corners are inverted on either axis
    """

    bottom_left: Point
    top_right: Point

    def __post_init__(self) -> None:
        if self.bottom_left.x > self.top_right.x or self.bottom_left.y > self.top_right.y:
            raise InvalidRectangleError(self.bottom_left.to_tuple(), self.top_right.to_tuple())

    @classmethod
    def from_bounds(cls, x_min: float, y_min: float, x_max: float, y_max: float) -> "Rectangle":
        """Build a rectangle from its coordinate bounds."""
        return cls(Point(float(x_min), float(y_min)), Point(float(x_max), float(y_max)))

    @property
    def width(self) -> float:
        return self.top_right.x - self.bottom_left.x

    @property
    def height(self) -> float:
        return self.top_right.y - self.bottom_left.y

    @property
    def center(self) -> Point:
        return Point(
            (self.bottom_left.x + self.top_right.x) / 2,
            (self.bottom_left.y + self.top_right.y) / 2,
        )

    @property
    def diagonal(self) -> float:
        """Corner-to-corner distance."""
        return math.sqrt(self.width * self.width + self.height * self.height)

    def is_degenerate(self) -> bool:
        """True when the rectangle has zero width or zero height."""
        return self.width == 0 or self.height == 0

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        """Check if a point lies in the closed rectangle.

        Args:
            point: The point to test
            tolerance: Allowed overshoot on every side

        Returns:
            True if the point is inside or on the boundary
        """
        return (
            self.bottom_left.x - tolerance <= point.x <= self.top_right.x + tolerance
            and self.bottom_left.y - tolerance <= point.y <= self.top_right.y + tolerance
        )

    def corners(self) -> list[Point]:
        """Corners in contour order: bottom-left, bottom-right, top-right, top-left."""
        return [
            self.bottom_left,
            Point(self.top_right.x, self.bottom_left.y),
            self.top_right,
            Point(self.bottom_left.x, self.top_right.y),
        ]

    def edges(self) -> list[Segment]:
        """The four boundary edges, closing back to the bottom-left corner."""
        corners = self.corners()
        return [
            Segment(corners[i], corners[(i + 1) % len(corners)])
            for i in range(len(corners))
        ]
