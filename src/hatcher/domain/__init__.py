"""Domain models for hatcher.

This module contains the value types the generator and clipper work on.
All models are:

- Immutable (frozen dataclasses)
- Slotted, since a run creates one Point pair per hatch line
- Independent of any output format

Key classes:
- Point: A 2D point
- Segment: A directed pair of points
- Rectangle: An axis-aligned clip rectangle given by two opposite corners
"""

from hatcher.domain.rectangle import Rectangle
from hatcher.domain.segment import Point, Segment

__all__: list[str] = [
    "Point",
    "Rectangle",
    "Segment",
]
