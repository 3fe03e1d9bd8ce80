"""Exception hierarchy for Hatcher."""


class HatcherError(Exception):
    """Base exception for all Hatcher errors."""

    pass


class ConfigurationError(HatcherError, ValueError):
    """Invalid generation parameters."""

    pass


class InvalidStepError(ConfigurationError):
    """Hatch spacing is not a positive finite number."""

    def __init__(self, step: float) -> None:
        self.step = step
        super().__init__(f"step must be greater than zero (got {step})")


class InvalidAngleError(ConfigurationError):
    """Hatch angle is not a finite number."""

    def __init__(self, angle: float) -> None:
        self.angle = angle
        super().__init__(f"angle must be a finite number of degrees (got {angle})")


class GeometryError(HatcherError):
    """Errors in geometric input."""

    pass


class InvalidRectangleError(GeometryError, ValueError):
    """Rectangle corners are not ordered bottom-left to top-right."""

    def __init__(self, bottom_left: tuple[float, float], top_right: tuple[float, float]) -> None:
        self.bottom_left = bottom_left
        self.top_right = top_right
        super().__init__(
            f"Invalid rectangle {bottom_left} - {top_right}: "
            "bottom-left corner must not exceed top-right corner"
        )


class OutputError(HatcherError):
    """Errors related to writing results."""

    pass


class SvgWriteError(OutputError):
    """Error saving an SVG drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")
