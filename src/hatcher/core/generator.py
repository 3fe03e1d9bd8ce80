"""Hatch line generation.

This module produces the family of parallel lines that shades a rectangle:

- 0/360 degrees: horizontal lines, enumerated bottom to top
- 180 degrees: horizontal lines, enumerated top to bottom
- 90/270 degrees: vertical lines, enumerated left to right
- Any other angle: lines as long as the rectangle's diagonal, centred on
  the rectangle and spaced along the perpendicular, then clipped

Loops advance a floating coordinate by ``step`` and compare it inclusively
against the far bound, so the line count is
``floor((end - start) / step) + 1`` subject to accumulated rounding.
"""

import logging
from collections.abc import Iterator

from hatcher.core.clipper import clip_segment
from hatcher.core.geometry import (
    degrees_to_radians,
    direction_vector,
    normalize_angle,
    perpendicular,
    validate_step,
)
from hatcher.domain import Point, Rectangle, Segment

logger = logging.getLogger(__name__)

HORIZONTAL_ANGLES = (0.0, 360.0)
REVERSED_HORIZONTAL_ANGLES = (180.0, -180.0)
VERTICAL_ANGLES = (90.0, -90.0, 270.0, -270.0)

# Clipping onto a zero-area rectangle can leave endpoints an ulp apart
DEGENERATE_LENGTH = 1e-9


class HatchGenerator:
    """Generates clipped hatch lines for one rectangle.

    The generator holds no state between calls; every call returns a fresh
    list.

    Example:
        generator = HatchGenerator(Rectangle.from_bounds(0, 0, 20, 10))
        segments = generator.generate(angle=45, step=1)
    """

    def __init__(self, rectangle: Rectangle) -> None:
        """Initialize the generator.

        Args:
            rectangle: Region to hatch and clip against
        """
        self.rectangle = rectangle

    def candidates(self, angle: float, step: float) -> Iterator[Segment]:
        """Yield unclipped hatch lines in generation order.

        Axis-aligned angles yield lines that already span the rectangle
        exactly. Other angles yield full-diagonal candidates that still
        need clipping.

        Args:
            angle: Hatch angle in degrees (any finite value)
            step: Spacing between lines, measured perpendicular to them

        Raises:
            InvalidStepError: If step is not a positive finite number
            InvalidAngleError: If angle is not finite
        """
        validate_step(step)
        yield from self._candidates(normalize_angle(angle), step)

    def _candidates(self, angle: float, step: float) -> Iterator[Segment]:
        bl = self.rectangle.bottom_left
        tr = self.rectangle.top_right

        if angle in HORIZONTAL_ANGLES:
            y = bl.y
            while y <= tr.y:
                yield Segment(Point(bl.x, y), Point(tr.x, y))
                y += step
        elif angle in REVERSED_HORIZONTAL_ANGLES:
            y = tr.y
            while y >= bl.y:
                yield Segment(Point(bl.x, y), Point(tr.x, y))
                y -= step
        elif angle in VERTICAL_ANGLES:
            x = bl.x
            while x <= tr.x:
                yield Segment(Point(x, bl.y), Point(x, tr.y))
                x += step
        else:
            yield from self._diagonal_candidates(angle, step)

    def _diagonal_candidates(self, angle: float, step: float) -> Iterator[Segment]:
        dx, dy = direction_vector(degrees_to_radians(angle))
        px, py = perpendicular((dx, dy))

        center = self.rectangle.center
        diagonal = self.rectangle.diagonal
        half = diagonal / 2

        offset = -half
        while offset <= half:
            yield Segment(
                Point(
                    center.x + px * offset - dx * diagonal / 2,
                    center.y + py * offset - dy * diagonal / 2,
                ),
                Point(
                    center.x + px * offset + dx * diagonal / 2,
                    center.y + py * offset + dy * diagonal / 2,
                ),
            )
            offset += step

    def generate_with_stats(self, angle: float, step: float) -> tuple[list[Segment], int]:
        """Generate clipped hatch lines and count the candidates tried.

        Args:
            angle: Hatch angle in degrees
            step: Spacing between lines

        Returns:
            Tuple of (accepted segments in generation order, candidate count)

        Raises:
            InvalidStepError: If step is not a positive finite number
            InvalidAngleError: If angle is not finite
        """
        validate_step(step)
        normalized = normalize_angle(angle)
        needs_clipping = normalized not in (
            HORIZONTAL_ANGLES + REVERSED_HORIZONTAL_ANGLES + VERTICAL_ANGLES
        )
        degenerate = self.rectangle.is_degenerate()

        logger.debug(
            "Generating hatch angle=%s step=%s clipped=%s degenerate=%s",
            normalized,
            step,
            needs_clipping,
            degenerate,
        )

        segments: list[Segment] = []
        candidate_count = 0

        for candidate in self._candidates(normalized, step):
            candidate_count += 1

            if needs_clipping:
                result = clip_segment(candidate, self.rectangle)
                if not result.accepted:
                    continue
                segment = result.segment
            else:
                segment = candidate

            if degenerate and segment.is_degenerate(DEGENERATE_LENGTH):
                continue

            segments.append(segment)

        logger.debug(
            "Generated %d segments from %d candidates", len(segments), candidate_count
        )
        return segments, candidate_count

    def generate(self, angle: float, step: float) -> list[Segment]:
        """Generate clipped hatch lines.

        Args:
            angle: Hatch angle in degrees
            step: Spacing between lines

        Returns:
            Accepted segments in generation order
        """
        segments, _ = self.generate_with_stats(angle, step)
        return segments


def generate_hatch(rectangle: Rectangle, angle: float, step: float) -> list[Segment]:
    """Generate hatch lines covering ``rectangle``.

    Args:
        rectangle: Region to hatch
        angle: Hatch angle in degrees, normalized to [0, 360) internally
        step: Spacing between lines, must be greater than zero

    Returns:
        Accepted, clipped segments in generation order

    Raises:
        InvalidStepError: If step is not a positive finite number
        InvalidAngleError: If angle is not finite

    Examples:
        >>> rect = Rectangle.from_bounds(0, 0, 20, 10)
        >>> len(generate_hatch(rect, 0, 1))
        11
    """
    return HatchGenerator(rectangle).generate(angle, step)
