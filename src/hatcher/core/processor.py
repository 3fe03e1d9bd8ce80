"""Orchestration of a full hatch run.

This module coordinates the workflow from settings to files:

- HatchProcessor: builds the rectangle, runs the generator, records
  statistics and writes the SVG drawing
- HatchResult: everything the caller needs to report the run
"""

import time
from dataclasses import dataclass
from pathlib import Path

from hatcher.config import HatcherSettings
from hatcher.core.generator import HatchGenerator
from hatcher.core.geometry import normalize_angle
from hatcher.domain import Rectangle, Segment
from hatcher.io import SvgWriter
from hatcher.utils import HatchStats, RunLogger, configure_logging


@dataclass
class HatchResult:
    """Result of one hatch run.

    Attributes:
        rectangle: The clip rectangle
        angle: Normalized hatch angle in degrees
        step: Spacing between lines
        segments: Accepted, clipped segments in generation order
        stats: Candidate counts and timing
        output_path: Path of the written SVG, or None if none was written
    """

    rectangle: Rectangle
    angle: float
    step: float
    segments: list[Segment]
    stats: HatchStats
    output_path: Path | None = None

    @property
    def line_count(self) -> int:
        return len(self.segments)


class HatchProcessor:
    """Runs hatch generation for a set of settings.

    Manages the complete workflow:
    1. Build the clip rectangle from settings
    2. Generate and clip hatch lines
    3. Record statistics
    4. Save the SVG drawing

    Example:
        settings = HatcherSettings()
        processor = HatchProcessor(settings)
        result = processor.process(output_path=Path("hatch.svg"))
    """

    def __init__(self, config: HatcherSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Hatcher settings containing hatch, rectangle, svg and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )

    def process(self, output_path: Path | None = None, write_svg: bool = True) -> HatchResult:
        """Generate hatch lines and optionally save them.

        Args:
            output_path: Path for the SVG drawing (hatch.svg in the working
                directory if None)
            write_svg: If False, skip writing the drawing

        Returns:
            HatchResult with the segments, statistics and output path

        Raises:
            InvalidRectangleError: If the configured rectangle is inverted
            InvalidStepError: If the configured step is not positive
            SvgWriteError: If the drawing cannot be saved
        """
        run_logger = RunLogger(self.logger)
        stats = run_logger.stats
        stats.start_time = time.time()

        angle = self.config.hatch.angle
        step = self.config.hatch.step

        try:
            rectangle = self.config.rectangle.to_rectangle()
            normalized = normalize_angle(angle)

            run_logger.log_run_start(rectangle, normalized, step)
            if rectangle.is_degenerate():
                run_logger.log_degenerate_rectangle(rectangle)

            generator = HatchGenerator(rectangle)
            segments, candidate_count = generator.generate_with_stats(normalized, step)
            run_logger.log_segments(segments, candidate_count)

            written: Path | None = None
            if write_svg:
                if output_path is None:
                    output_path = SvgWriter.get_default_path()
                writer = SvgWriter(self.config.svg, output_path)
                written = writer.write(segments, rectangle)
                run_logger.log_output_written(written, len(segments))
        except Exception as e:
            run_logger.log_run_error(e)
            raise
        finally:
            stats.end_time = time.time()

        return HatchResult(
            rectangle=rectangle,
            angle=normalized,
            step=step,
            segments=segments,
            stats=stats,
            output_path=written,
        )
