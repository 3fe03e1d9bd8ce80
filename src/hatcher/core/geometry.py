"""Shared geometric helpers for hatch generation.

This module provides the small mathematical utilities the generator builds
on:
- Angle normalization to [0, 360)
- Degree to radian conversion
- Direction and perpendicular unit vectors

All functions are pure and stateless.
"""

import math

from hatcher.exceptions import InvalidAngleError, InvalidStepError


def normalize_angle(degrees: float) -> float:
    """Reduce an angle in degrees to the half-open range [0, 360).

    The angle is reduced with ``fmod`` first and shifted by a full turn
    when the remainder is negative. A tiny negative input can round up to
    exactly 360.0 after the shift; the generator treats 360 like 0.

    Args:
        degrees: Any finite angle in degrees

    Returns:
        Equivalent non-negative angle

    Raises:
        InvalidAngleError: If the angle is NaN or infinite

    Examples:
        >>> normalize_angle(-45.0)
        315.0
        >>> normalize_angle(765.0)
        45.0
    """
    if not math.isfinite(degrees):
        raise InvalidAngleError(degrees)

    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def validate_step(step: float) -> float:
    """Check that a hatch spacing is a positive finite number.

    Raises:
        InvalidStepError: If step is not greater than zero, NaN or infinite
    """
    if not (step > 0) or not math.isfinite(step):
        raise InvalidStepError(step)
    return step


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * math.pi / 180.0


def direction_vector(radians: float) -> tuple[float, float]:
    """Unit vector pointing along the given angle.

    Examples:
        >>> direction_vector(0.0)
        (1.0, 0.0)
    """
    return math.cos(radians), math.sin(radians)


def perpendicular(vector: tuple[float, float]) -> tuple[float, float]:
    """Rotate a vector 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
    x, y = vector
    return -y, x
