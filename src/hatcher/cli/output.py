"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages for each stage of a run.
"""


from rich.console import Console
from rich.markup import escape
from rich.text import Text

from hatcher.domain import Rectangle, Segment
from hatcher.io import format_number

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Hatcher[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_parameters(rectangle: Rectangle, angle: float, step: float) -> None:
    """Print the generation parameters.

    Args:
        rectangle: The clip rectangle
        angle: Normalized hatch angle in degrees
        step: Spacing between lines
    """
    bl = rectangle.bottom_left
    tr = rectangle.top_right
    console.print(
        f"  rectangle ({format_number(bl.x)},{format_number(bl.y)}) {SYM_DOT} "
        f"({format_number(tr.x)},{format_number(tr.y)})"
    )
    console.print(f"  angle {format_number(angle)}° {SYM_DOT} step {format_number(step)}")


def format_segment_line(index: int, segment: Segment) -> str:
    """Format one listing entry, e.g. ``Line 1: (0,0) -> (20,0)``."""
    return (
        f"Line {index}: ({format_number(segment.start.x)},{format_number(segment.start.y)})"
        f" -> ({format_number(segment.end.x)},{format_number(segment.end.y)})"
    )


def print_segments(segments: list[Segment]) -> None:
    """Print every hatch line, numbered from 1.

    Args:
        segments: Clipped hatch segments in generation order
    """
    for index, segment in enumerate(segments, start=1):
        # Plain Text so brackets in coordinates are never parsed as markup
        console.print(Text(format_segment_line(index, segment)))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    lines: int,
    candidates: int,
    rejected: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the SVG file, or None if none was written
        total_time_s: Total generation time in seconds
        lines: Number of accepted hatch lines
        candidates: Number of candidate lines generated
        rejected: Number of candidates the clipper rejected
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")
    console.print(
        f"  {lines} lines {SYM_DOT} {candidates} candidates {SYM_DOT} {rejected} rejected"
    )

    if output_path is not None:
        line = Text("SVG file generated: ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
