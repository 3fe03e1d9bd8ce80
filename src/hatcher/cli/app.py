"""CLI application entry point for hatcher.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import click
import typer

from hatcher import __version__
from hatcher.cli.output import (
    console,
    print_error,
    print_header,
    print_parameters,
    print_segments,
    print_step,
    print_success,
)
from hatcher.config import (
    HatchConfig,
    HatcherSettings,
    LoggingConfig,
    RectangleConfig,
    SvgConfig,
)
from hatcher.core import HatchProcessor
from hatcher.exceptions import ConfigurationError, GeometryError, HatcherError, SvgWriteError
from hatcher.io.writer import DEFAULT_OUTPUT_NAME

# Create the Typer app
app = typer.Typer(
    name="hatcher",
    help="Fill a rectangle with parallel hatch lines clipped to its boundary.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Hatcher[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def hatch(
    angle: Annotated[
        float,
        typer.Option(
            "--angle",
            "-a",
            help="Hatch angle in degrees (any value, reduced to 0-360)",
        ),
    ] = 45.0,
    step: Annotated[
        float,
        typer.Option(
            "--step",
            "-s",
            help="Distance between hatch lines (must be greater than zero)",
        ),
    ] = 1.0,
    rect: Annotated[
        tuple[float, float, float, float],
        typer.Option(
            "--rect",
            "-r",
            help="Rectangle bounds: X_MIN Y_MIN X_MAX Y_MAX",
        ),
    ] = (0.0, 0.0, 20.0, 10.0),
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path(DEFAULT_OUTPUT_NAME),
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            help="Drawing scale factor applied to coordinates",
        ),
    ] = 10.0,
    no_svg: Annotated[
        bool,
        typer.Option(
            "--no-svg",
            help="Print the lines without writing an SVG file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    pause: Annotated[
        bool,
        typer.Option(
            "--pause",
            help="Wait for a key press before exiting",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate hatch lines at ANGLE and STEP, clip them to the rectangle and save an SVG.

    Example:
        hatcher --angle 45 --step 1

    This prints every clipped line and writes hatch.svg with the hatching in
    black and the rectangle boundary in red.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not step > 0:
        print_error("step must be greater than zero")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    try:
        if not quiet:
            print_header(__version__)

        x_min, y_min, x_max, y_max = rect
        settings = HatcherSettings(
            hatch=HatchConfig(angle=angle, step=step),
            rectangle=RectangleConfig(x_min=x_min, y_min=y_min, x_max=x_max, y_max=y_max),
            svg=SvgConfig(scale=scale),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
                quiet=quiet,
            ),
        )

        processor = HatchProcessor(settings)

        if not quiet:
            print_step("Generating hatch lines")

        result = processor.process(output_path=output, write_svg=not no_svg)

        if not quiet:
            if verbose:
                print_parameters(result.rectangle, result.angle, result.step)
            print_segments(result.segments)
            print_success(
                output_path=str(result.output_path) if result.output_path else None,
                total_time_s=result.stats.duration_seconds,
                lines=result.line_count,
                candidates=result.stats.candidate_count,
                rejected=result.stats.rejected_count,
            )

    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeometryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except SvgWriteError as e:
        print_error(f"Could not save drawing: {e.reason}")
        raise typer.Exit(code=1)
    except HatcherError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        # Pydantic validation errors (non-finite numbers)
        print_error(f"Invalid parameters: {e}")
        raise typer.Exit(code=1)
    finally:
        if pause:
            click.pause()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
