"""Configuration settings for Hatcher."""

from pathlib import Path

from pydantic import BaseModel, Field

from hatcher.domain import Rectangle


class HatchConfig(BaseModel):
    """Configuration for hatch line generation."""

    angle: float = Field(
        default=45.0,
        allow_inf_nan=False,
        description="Hatch angle in degrees (normalized to [0, 360))",
    )
    step: float = Field(
        default=1.0,
        gt=0.0,
        allow_inf_nan=False,
        description="Spacing between hatch lines, measured perpendicular to them",
    )


class RectangleConfig(BaseModel):
    """The axis-aligned region to hatch."""

    x_min: float = Field(default=0.0, allow_inf_nan=False, description="Left edge")
    y_min: float = Field(default=0.0, allow_inf_nan=False, description="Bottom edge")
    x_max: float = Field(default=20.0, allow_inf_nan=False, description="Right edge")
    y_max: float = Field(default=10.0, allow_inf_nan=False, description="Top edge")

    def to_rectangle(self) -> Rectangle:
        """Build the domain rectangle.

        Raises:
            InvalidRectangleError: If the bounds are inverted
        """
        return Rectangle.from_bounds(self.x_min, self.y_min, self.x_max, self.y_max)


class SvgConfig(BaseModel):
    """Configuration for the SVG drawing."""

    scale: float = Field(
        default=10.0,
        gt=0.0,
        description="Linear factor applied to every coordinate",
    )
    width: int = Field(default=300, ge=1, description="Canvas width in pixels")
    height: int = Field(default=200, ge=1, description="Canvas height in pixels")
    hatch_stroke: str = Field(default="black", description="Hatch line colour")
    hatch_stroke_width: float = Field(default=0.5, gt=0.0, description="Hatch line width")
    border_stroke: str = Field(default="red", description="Rectangle boundary colour")
    border_stroke_width: float = Field(default=1.0, gt=0.0, description="Boundary line width")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output below ERROR",
    )


class HatcherSettings(BaseModel):
    """Main application settings."""

    hatch: HatchConfig = Field(default_factory=HatchConfig)
    rectangle: RectangleConfig = Field(default_factory=RectangleConfig)
    svg: SvgConfig = Field(default_factory=SvgConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> HatcherSettings:
    """Get default application settings."""
    return HatcherSettings()
