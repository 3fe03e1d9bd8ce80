"""Integration tests for generating and clipping hatch lines together."""

import math

import pytest

from hatcher.core import OutCode, clip_segment, compute_outcode, generate_hatch
from hatcher.domain import Point, Rectangle, Segment

TOLERANCE = 1e-9


@pytest.fixture
def rect() -> Rectangle:
    return Rectangle.from_bounds(0, 0, 20, 10)


class TestHatchProperties:
    """Properties that hold for any angle and step."""

    @pytest.mark.parametrize("angle", [0, 15, 30, 45, 60, 89.5, 90, 120, 180, 225, 270, 333])
    @pytest.mark.parametrize("step", [0.3, 1, 4])
    def test_segments_inside_rectangle(self, rect: Rectangle, angle: float, step: float) -> None:
        """Every returned segment lies in the closed rectangle."""
        for segment in generate_hatch(rect, angle, step):
            assert rect.contains(segment.start, tolerance=TOLERANCE)
            assert rect.contains(segment.end, tolerance=TOLERANCE)

    @pytest.mark.parametrize("angle", [10, 45, 135, 200, 315])
    def test_clipping_generated_segments_is_stable(self, rect: Rectangle, angle: float) -> None:
        """Generated segments are already clipped."""
        for segment in generate_hatch(rect, angle, 1):
            result = clip_segment(segment, rect)
            assert result.accepted
            assert result.segment == segment

    @pytest.mark.parametrize("angle", [20, 45, 70, 110, 160])
    def test_reasonable_steps_all_cross(self, rect: Rectangle, angle: float) -> None:
        """Halving the step roughly doubles the line count."""
        coarse = generate_hatch(rect, angle, 2)
        fine = generate_hatch(rect, angle, 1)
        assert coarse
        assert len(fine) >= 2 * len(coarse) - 2

    def test_every_point_of_rectangle_near_a_line(self, rect: Rectangle) -> None:
        """Hatching covers the rectangle: no interior point is farther than a step."""
        step = 1.0
        segments = generate_hatch(rect, 37, step)
        for x in range(1, 20, 3):
            for y in range(1, 10, 3):
                nearest = min(_distance_to_segment(Point(x, y), s) for s in segments)
                assert nearest <= step


class TestOutcodesOnGeneratedLines:
    """Endpoints of generated segments are never outside."""

    def test_endpoints_inside(self, rect: Rectangle) -> None:
        for segment in generate_hatch(rect, 45, 0.7):
            assert compute_outcode(segment.start, rect) == OutCode.INSIDE
            assert compute_outcode(segment.end, rect) == OutCode.INSIDE


def _distance_to_segment(point: Point, segment: Segment) -> float:
    dx = segment.end.x - segment.start.x
    dy = segment.end.y - segment.start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(point.x - segment.start.x, point.y - segment.start.y)
    t = ((point.x - segment.start.x) * dx + (point.y - segment.start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(
        point.x - (segment.start.x + t * dx),
        point.y - (segment.start.y + t * dy),
    )
