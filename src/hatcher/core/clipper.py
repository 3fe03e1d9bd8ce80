"""Cohen-Sutherland clipping of segments against an axis-aligned rectangle.

Each endpoint is classified with a 4-bit outcode. The clip loop accepts a
segment once both codes are zero, rejects it once both endpoints share an
excluded side, and otherwise moves one outside endpoint onto the boundary
it violates, then reclassifies it.

Boundary priority is fixed (TOP, BOTTOM, RIGHT, LEFT) and the X test runs
before the Y test in ``compute_outcode``, so results on boundary-touching
input are reproducible bit for bit.

There are no zero-division guards in the interpolation: a horizontal
segment can only be outside LEFT/RIGHT and a vertical one only
TOP/BOTTOM, so the perpendicular intersection is never requested.
"""

from dataclasses import dataclass
from enum import IntFlag

from hatcher.domain import Point, Rectangle, Segment


class OutCode(IntFlag):
    """Position of a point relative to the clip rectangle."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


@dataclass(frozen=True, slots=True)
class ClipResult:
    """Outcome of clipping one segment.

    Attributes:
        accepted: False when the segment lies entirely outside
        segment: The trimmed segment, or None when rejected
    """

    accepted: bool
    segment: Segment | None = None

    def __bool__(self) -> bool:
        return self.accepted


def compute_outcode(point: Point, rectangle: Rectangle) -> OutCode:
    """Classify a point against the rectangle's four half-planes.

    LEFT/RIGHT and BOTTOM/TOP are mutually exclusive pairs.

    Args:
        point: Point to classify
        rectangle: Clip rectangle

    Returns:
        Combined outcode, ``OutCode.INSIDE`` for points in the closed rectangle
    """
    code = OutCode.INSIDE
    if point.x < rectangle.bottom_left.x:
        code |= OutCode.LEFT
    elif point.x > rectangle.top_right.x:
        code |= OutCode.RIGHT

    if point.y < rectangle.bottom_left.y:
        code |= OutCode.BOTTOM
    elif point.y > rectangle.top_right.y:
        code |= OutCode.TOP

    return code


def clip_segment(segment: Segment, rectangle: Rectangle) -> ClipResult:
    """Clip a segment to the rectangle.

    Args:
        segment: Candidate segment, left untouched
        rectangle: Clip rectangle

    Returns:
        ClipResult holding a new trimmed segment when any part of the input
        lies in the closed rectangle; a rejected result otherwise

    Examples:
        >>> rect = Rectangle.from_bounds(0, 0, 20, 10)
        >>> clip_segment(Segment.from_coords(-5, 5, 25, 5), rect).segment.to_tuple()
        ((0.0, 5.0), (20.0, 5.0))
    """
    bl = rectangle.bottom_left
    tr = rectangle.top_right

    x0, y0 = segment.start.x, segment.start.y
    x1, y1 = segment.end.x, segment.end.y

    outcode0 = compute_outcode(Point(x0, y0), rectangle)
    outcode1 = compute_outcode(Point(x1, y1), rectangle)

    while True:
        if not (outcode0 | outcode1):
            return ClipResult(True, Segment(Point(x0, y0), Point(x1, y1)))

        if outcode0 & outcode1:
            return ClipResult(False)

        outcode_out = outcode0 if outcode0 else outcode1

        if outcode_out & OutCode.TOP:
            x = x0 + (x1 - x0) * (tr.y - y0) / (y1 - y0)
            y = tr.y
        elif outcode_out & OutCode.BOTTOM:
            x = x0 + (x1 - x0) * (bl.y - y0) / (y1 - y0)
            y = bl.y
        elif outcode_out & OutCode.RIGHT:
            y = y0 + (y1 - y0) * (tr.x - x0) / (x1 - x0)
            x = tr.x
        else:
            y = y0 + (y1 - y0) * (bl.x - x0) / (x1 - x0)
            x = bl.x

        if outcode_out == outcode0:
            x0, y0 = x, y
            outcode0 = compute_outcode(Point(x0, y0), rectangle)
        else:
            x1, y1 = x, y
            outcode1 = compute_outcode(Point(x1, y1), rectangle)
