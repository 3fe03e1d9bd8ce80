"""Core algorithms for hatcher.

This module contains the core algorithms for:

- Geometry helpers (angle normalization, direction vectors)
- Cohen-Sutherland clipping against an axis-aligned rectangle
- Hatch line generation at any angle and spacing
- Run orchestration (statistics, logging, output)

The generator and clipper are:
- Stateless
- Pure (no I/O, no shared mutable state)

Key functions:
- normalize_angle: Reduce an angle to [0, 360)
- compute_outcode: Classify a point against the rectangle
- clip_segment: Clip a segment to the rectangle
- generate_hatch: Produce clipped hatch lines

Key classes:
- HatchGenerator: Generates hatch lines for one rectangle
- HatchProcessor: Runs a full generation from settings
"""

from hatcher.core.clipper import ClipResult, OutCode, clip_segment, compute_outcode
from hatcher.core.generator import HatchGenerator, generate_hatch
from hatcher.core.geometry import (
    degrees_to_radians,
    direction_vector,
    normalize_angle,
    perpendicular,
    validate_step,
)
from hatcher.core.processor import HatchProcessor, HatchResult

__all__ = [
    # Clipper
    "ClipResult",
    # Generator classes
    "HatchGenerator",
    # Processor classes
    "HatchProcessor",
    "HatchResult",
    "OutCode",
    "clip_segment",
    "compute_outcode",
    # Geometry functions
    "degrees_to_radians",
    "direction_vector",
    "generate_hatch",
    "normalize_angle",
    "perpendicular",
    "validate_step",
]
