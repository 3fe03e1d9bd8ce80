"""SVG writer for hatch drawings.

This module provides the SvgWriter class and the drawsvg drawing it saves.
The drawing holds two categories of lines: the hatch segments and the
four edges of the clip rectangle.
"""

from pathlib import Path

import drawsvg as draw

from hatcher.config import SvgConfig
from hatcher.domain import Rectangle, Segment
from hatcher.exceptions import SvgWriteError

DEFAULT_OUTPUT_NAME = "hatch.svg"


def format_number(value: float) -> str:
    """Format a coordinate with six significant digits, like printf's %g.

    Examples:
        >>> format_number(70.71067811865476)
        '70.7107'
        >>> format_number(200.0)
        '200'
    """
    text = f"{value:g}"
    # Avoid "-0" for values that round to zero from below
    return "0" if text == "-0" else text


def _scaled(value: float, scale: float) -> float:
    return float(format_number(value * scale))


def _line(segment: Segment, scale: float, stroke: str, stroke_width: float) -> draw.Line:
    return draw.Line(
        _scaled(segment.start.x, scale),
        _scaled(segment.start.y, scale),
        _scaled(segment.end.x, scale),
        _scaled(segment.end.y, scale),
        stroke=stroke,
        stroke_width=stroke_width,
        fill="none",
    )


def build_drawing(
    segments: list[Segment], rectangle: Rectangle, config: SvgConfig
) -> draw.Drawing:
    """Build the drawsvg drawing for hatch segments and the rectangle boundary.

    Hatch lines are appended first, in generation order, followed by the
    rectangle edges starting at the bottom-left corner. Coordinates are
    multiplied by ``config.scale`` and rounded to six significant digits.
    The origin is the top-left corner of the canvas; the Y axis is not
    flipped.

    Args:
        segments: Clipped hatch segments
        rectangle: The clip rectangle
        config: Canvas, scale and stroke settings

    Returns:
        Drawing ready to render or save
    """
    drawing = draw.Drawing(config.width, config.height)

    for segment in segments:
        drawing.append(
            _line(segment, config.scale, config.hatch_stroke, config.hatch_stroke_width)
        )

    for edge in rectangle.edges():
        drawing.append(
            _line(edge, config.scale, config.border_stroke, config.border_stroke_width)
        )

    return drawing


def build_svg(segments: list[Segment], rectangle: Rectangle, config: SvgConfig) -> str:
    """Render hatch segments and the rectangle boundary as SVG text."""
    return build_drawing(segments, rectangle, config).as_svg()


class SvgWriter:
    """Writes hatch drawings to SVG files.

    Example:
        writer = SvgWriter(SvgConfig(), Path("hatch.svg"))
        writer.write(segments, rectangle)
    """

    def __init__(self, config: SvgConfig, output_path: Path) -> None:
        """Initialize the SVG writer.

        Args:
            config: Canvas, scale and stroke settings
            output_path: Path where the drawing will be saved
        """
        self._config = config
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, segments: list[Segment], rectangle: Rectangle) -> Path:
        """Save the drawing.

        Args:
            segments: Clipped hatch segments
            rectangle: The clip rectangle

        Returns:
            The path written

        Raises:
            SvgWriteError: If the file cannot be written
        """
        drawing = build_drawing(segments, rectangle, self._config)
        try:
            drawing.save_svg(str(self._output_path))
        except OSError as e:
            raise SvgWriteError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_default_path(directory: Path | None = None) -> Path:
        """Default output location: hatch.svg in ``directory`` or the working directory."""
        return (directory or Path.cwd()) / DEFAULT_OUTPUT_NAME
