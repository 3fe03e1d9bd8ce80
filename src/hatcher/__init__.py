"""Hatcher - Fill rectangles with clipped parallel hatch lines.

Hatcher is a CLI tool that generates a family of parallel hatch lines at a
given angle and spacing, clips every line to an axis-aligned rectangle with
the Cohen-Sutherland algorithm and writes the result as an SVG drawing.

Example:
    $ hatcher --angle 45 --step 1

This will print the clipped lines and create hatch.svg with the hatching
drawn in black and the rectangle boundary drawn in red.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
