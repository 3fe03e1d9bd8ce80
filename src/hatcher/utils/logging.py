"""Logging utilities for Hatcher."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

from hatcher.domain import Rectangle, Segment

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class HatchStats:
    """Statistics from a generation run."""

    candidate_count: int = 0
    accepted_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def rejected_count(self) -> int:
        """Candidates discarded by the clipper."""
        return self.candidate_count - self.accepted_count

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("hatcher")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RunLogger:
    """Logger for tracking a generation run and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = HatchStats()

    def log_run_start(self, rectangle: Rectangle, angle: float, step: float) -> None:
        """Log the parameters of a run."""
        self._logger.info(
            "Starting hatch generation",
            bottom_left=rectangle.bottom_left.to_tuple(),
            top_right=rectangle.top_right.to_tuple(),
            angle=angle,
            step=step,
        )

    def log_degenerate_rectangle(self, rectangle: Rectangle) -> None:
        """Warn about a zero-area rectangle."""
        self._logger.warning(
            "Rectangle has zero area, zero-length lines will be dropped",
            width=rectangle.width,
            height=rectangle.height,
        )

    def log_segments(self, segments: list[Segment], candidate_count: int) -> None:
        """Log generation results and record them in the statistics."""
        for index, segment in enumerate(segments, start=1):
            self._logger.debug(
                "Hatch line",
                index=index,
                start=segment.start.to_tuple(),
                end=segment.end.to_tuple(),
            )
        self._stats.candidate_count += candidate_count
        self._stats.accepted_count += len(segments)
        self._logger.info(
            "Hatch lines generated",
            candidates=candidate_count,
            accepted=len(segments),
            rejected=candidate_count - len(segments),
        )

    def log_output_written(self, path: Path, line_count: int) -> None:
        """Log a written drawing."""
        self._logger.info("SVG written", path=str(path), lines=line_count)

    def log_run_error(self, error: Exception) -> None:
        """Log a failed run."""
        self._logger.error(
            "Hatch generation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> HatchStats:
        """Get current run statistics."""
        return self._stats
