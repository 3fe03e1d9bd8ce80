"""Command-line interface for hatcher.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Angle, step and rectangle options
- Numbered listing of every clipped line
- Verbose/quiet output modes
- Optional pause before exit
"""

from hatcher.cli.app import cli, main

__all__ = ["cli", "main"]
